# services/dealership_sqlite.py
import sqlite3
from typing import Dict, List, Optional

VALID_TEST_DRIVE_STATUSES = ("PENDING", "CONFIRMED", "COMPLETED", "CANCELLED", "NO_SHOW")

def _row_to_dict(row: sqlite3.Row) -> Dict:
    return {k: row[k] for k in row.keys()}

def serialize_car(row: Dict) -> Dict:
    """Car row as returned to clients: numeric price, boolean featured flag."""
    car = dict(row)
    car["price"] = float(car["price"]) if car.get("price") is not None else 0.0
    if "featured" in car:
        car["featured"] = bool(car["featured"])
    return car

class DealershipServiceSQL:
    def __init__(self, db_path: str = "src/data/mock.db"):
        self.db_path = db_path

    def _con(self):
        con = sqlite3.connect(self.db_path)
        con.row_factory = sqlite3.Row
        con.execute("PRAGMA foreign_keys = ON;")
        return con

    # --- users ---
    def get_user(self, user_id: str) -> Dict:
        with self._con() as con:
            r = con.execute("SELECT * FROM users WHERE user_id=?;", (user_id,)).fetchone()
            if not r: raise KeyError("User not found")
            return _row_to_dict(r)

    def require_admin(self, user_id: Optional[str]) -> Dict:
        """Return the user if they are an admin; raise PermissionError otherwise."""
        if not user_id:
            raise PermissionError("Unauthorized")
        user = self.get_user(user_id)
        if user["role"] != "ADMIN":
            raise PermissionError("Unauthorized access")
        return user

    # --- cars ---
    def get_car(self, car_id: str) -> Dict:
        with self._con() as con:
            r = con.execute("SELECT * FROM cars WHERE car_id=?;", (car_id,)).fetchone()
            if not r: raise KeyError("Car not found")
            return serialize_car(_row_to_dict(r))

    def get_featured_cars(self, limit: int = 3) -> List[Dict]:
        with self._con() as con:
            cur = con.execute("""
                SELECT * FROM cars
                WHERE featured=1 AND status='AVAILABLE'
                ORDER BY created_at DESC
                LIMIT ?
            """, (limit,))
            return [serialize_car(_row_to_dict(x)) for x in cur.fetchall()]

    def search_cars(self, make: Optional[str] = None, body_type: Optional[str] = None,
                    color: Optional[str] = None) -> List[Dict]:
        """
        Available cars matching the given attributes (case-insensitive).
        Empty/None filters are ignored, so image search results with a blank
        field still match on the others.
        """
        clauses = ["status='AVAILABLE'"]
        params: List[str] = []
        for column, value in (("make", make), ("body_type", body_type), ("color", color)):
            if value:
                clauses.append(f"LOWER({column})=LOWER(?)")
                params.append(value.strip())
        with self._con() as con:
            cur = con.execute(
                f"SELECT * FROM cars WHERE {' AND '.join(clauses)} ORDER BY created_at DESC;",
                params,
            )
            return [serialize_car(_row_to_dict(x)) for x in cur.fetchall()]

    # --- test drives ---
    def get_admin_test_drives(self, search: str = "", status: str = "") -> List[Dict]:
        """
        Test drive bookings for the admin list.

        Args:
            search: matched against car make/model and user name/email
            status: exact booking status filter

        Returns:
            Bookings (newest booking date first, then by start time) with the
            related car and user nested.
        """
        clauses, params = [], []
        if status:
            clauses.append("td.status=?")
            params.append(status)
        if search:
            like = f"%{search.lower()}%"
            clauses.append("""(LOWER(c.make) LIKE ? OR LOWER(c.model) LIKE ?
                               OR LOWER(u.name) LIKE ? OR LOWER(u.email) LIKE ?)""")
            params.extend([like] * 4)
        where = ("WHERE " + " AND ".join(clauses)) if clauses else ""
        with self._con() as con:
            cur = con.execute(f"""
                SELECT td.*,
                       u.name AS user_name, u.email AS user_email, u.phone AS user_phone
                FROM test_drives td
                JOIN cars c ON c.car_id = td.car_id
                JOIN users u ON u.user_id = td.user_id
                {where}
                ORDER BY td.booking_date DESC, td.start_time ASC
            """, params)
            rows = [_row_to_dict(x) for x in cur.fetchall()]
            cars = {}
            for r in rows:
                if r["car_id"] not in cars:
                    car = con.execute("SELECT * FROM cars WHERE car_id=?;", (r["car_id"],)).fetchone()
                    cars[r["car_id"]] = serialize_car(_row_to_dict(car))

        return [{
            "id": r["booking_id"],
            "car_id": r["car_id"],
            "car": cars[r["car_id"]],
            "user_id": r["user_id"],
            "user": {
                "id": r["user_id"],
                "name": r["user_name"],
                "email": r["user_email"],
                "phone": r["user_phone"],
            },
            "booking_date": r["booking_date"],
            "start_time": r["start_time"],
            "end_time": r["end_time"],
            "status": r["status"],
            "notes": r["notes"],
            "created_at": r["created_at"],
            "updated_at": r["updated_at"],
        } for r in rows]

    def update_test_drive_status(self, booking_id: str, new_status: str) -> Dict:
        with self._con() as con:
            b = con.execute("SELECT * FROM test_drives WHERE booking_id=?;", (booking_id,)).fetchone()
            if not b: raise KeyError("Booking not found")
            if new_status not in VALID_TEST_DRIVE_STATUSES:
                return {"success": False, "error": "Invalid status"}
            con.execute(
                "UPDATE test_drives SET status=?, updated_at=datetime('now') WHERE booking_id=?;",
                (new_status, booking_id),
            )
            return {"success": True, "message": "Test drive status updated successfully"}

    # --- dashboard ---
    def get_dashboard_data(self) -> Dict:
        """Inventory counts and test drive funnel, including conversion rate (%)."""
        with self._con() as con:
            cars = [_row_to_dict(x) for x in con.execute("SELECT car_id, status, featured FROM cars;")]
            drives = [_row_to_dict(x) for x in con.execute("SELECT booking_id, status, car_id FROM test_drives;")]

        def count(rows, status):
            return sum(1 for r in rows if r["status"] == status)

        completed_car_ids = {d["car_id"] for d in drives if d["status"] == "COMPLETED"}
        sold_after_test_drive = sum(
            1 for c in cars if c["status"] == "SOLD" and c["car_id"] in completed_car_ids
        )
        completed = count(drives, "COMPLETED")
        conversion_rate = (sold_after_test_drive / completed) * 100 if completed > 0 else 0

        return {
            "cars": {
                "total": len(cars),
                "available": count(cars, "AVAILABLE"),
                "sold": count(cars, "SOLD"),
                "unavailable": count(cars, "UNAVAILABLE"),
                "featured": sum(1 for c in cars if c["featured"]),
            },
            "testDrives": {
                "total": len(drives),
                "pending": count(drives, "PENDING"),
                "confirmed": count(drives, "CONFIRMED"),
                "completed": completed,
                "cancelled": count(drives, "CANCELLED"),
                "noShow": count(drives, "NO_SHOW"),
                "conversionRate": round(conversion_rate, 2),
            },
        }
