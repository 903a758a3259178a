import os
from typing import Optional

from fastapi import FastAPI, Header, HTTPException
from pydantic import BaseModel
from src.services.dealership_sqlite import DealershipServiceSQL

app = FastAPI(title="Car Dealership API (SQLite)")
svc = DealershipServiceSQL(os.getenv("DEALERSHIP_DB", "src/data/mock.db"))

@app.get("/")
def root():
    return {
        "message": "Car Dealership API (SQLite)",
        "version": "1.0.0",
        "endpoints": {
            "GET /cars/featured": "Featured cars for the homepage",
            "GET /cars": "Search available cars by make, body_type and color",
            "GET /cars/{car_id}": "Get car details",
            "GET /admin/dashboard": "Inventory and test drive statistics (admin)",
            "GET /admin/test-drives": "Test drive bookings with search/status filters (admin)",
            "POST /admin/test-drives/{booking_id}/status": "Update a test drive status (admin)",
        },
        "docs": "/docs"
    }

class StatusIn(BaseModel):
    status: str

def _admin(user_id: Optional[str]):
    """Resolve the X-User-Id header to an admin user or fail the request."""
    if not user_id:
        raise HTTPException(401, "Unauthorized")
    try:
        return svc.require_admin(user_id)
    except KeyError:
        raise HTTPException(401, "Unauthorized")
    except PermissionError as e:
        raise HTTPException(403, str(e))

@app.get("/cars/featured")
def featured_cars(limit: int = 3):
    return svc.get_featured_cars(limit)

@app.get("/cars")
def search_cars(make: Optional[str] = None, body_type: Optional[str] = None, color: Optional[str] = None):
    cars = svc.search_cars(make=make, body_type=body_type, color=color)
    return {"filters": {"make": make, "body_type": body_type, "color": color},
            "cars": cars, "total": len(cars)}

@app.get("/cars/{car_id}")
def get_car(car_id: str):
    try:
        return svc.get_car(car_id)
    except KeyError:
        raise HTTPException(404, "Car not found")

@app.get("/admin/dashboard")
def dashboard(x_user_id: Optional[str] = Header(None)):
    _admin(x_user_id)
    return {"success": True, "data": svc.get_dashboard_data()}

@app.get("/admin/test-drives")
def admin_test_drives(search: str = "", status: str = "", x_user_id: Optional[str] = Header(None)):
    _admin(x_user_id)
    return {"success": True, "data": svc.get_admin_test_drives(search=search, status=status)}

@app.post("/admin/test-drives/{booking_id}/status")
def update_test_drive_status(booking_id: str, body: StatusIn, x_user_id: Optional[str] = Header(None)):
    _admin(x_user_id)
    try:
        res = svc.update_test_drive_status(booking_id, body.status)
    except KeyError:
        raise HTTPException(404, "Booking not found")
    if not res.get("success"):
        raise HTTPException(400, res.get("error", "cannot update"))
    return res
