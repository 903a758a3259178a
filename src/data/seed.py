import sqlite3, os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DB = (BASE_DIR / "mock.db").as_posix()
SCHEMA = (BASE_DIR / "schema.sql").as_posix()

USERS = [
  ("U001","Admin User","admin@example.com","+15550000001","ADMIN"),
  ("U002","Alice Nguyen","alice@example.com","+15550000002","USER"),
  ("U003","Bob Tran","bob@example.com","+15550000003","USER"),
  ("U004","Carol Le","carol@example.com",None,"USER"),
]

CARS = [
  # car_id, make, model, year, price, body_type, color, status, featured, created_at
  ("C001","Toyota","RAV4",2022,28500,"SUV","Red","AVAILABLE",1,"2025-09-01T10:00:00"),
  ("C002","Honda","Civic",2021,21000,"Sedan","Blue","AVAILABLE",1,"2025-09-02T10:00:00"),
  ("C003","Ford","F-150",2020,35000,"Pickup","Black","SOLD",0,"2025-08-20T10:00:00"),
  ("C004","Toyota","Camry",2023,27000,"Sedan","White","AVAILABLE",0,"2025-09-03T10:00:00"),
  ("C005","BMW","X5",2019,41000,"SUV","Black","SOLD",1,"2025-08-15T10:00:00"),
  ("C006","Volkswagen","Golf",2020,18000,"Hatchback","Red","UNAVAILABLE",0,"2025-08-25T10:00:00"),
  ("C007","Toyota","Highlander",2022,36000,"SUV","Red","AVAILABLE",1,"2025-09-04T10:00:00"),
]

TEST_DRIVES = [
  # booking_id, car_id, user_id, booking_date, start_time, end_time, status, notes
  ("TD001","C003","U002","2025-09-05","10:00","11:00","COMPLETED",None),
  ("TD002","C005","U003","2025-09-06","09:00","10:00","COMPLETED","Asked about financing"),
  ("TD003","C001","U002","2025-09-07","14:00","15:00","COMPLETED",None),
  ("TD004","C002","U004","2025-09-08","11:00","12:00","PENDING",None),
  ("TD005","C004","U003","2025-09-08","09:00","10:00","CONFIRMED",None),
  ("TD006","C007","U004","2025-09-09","16:00","17:00","CANCELLED",None),
  ("TD007","C001","U003","2025-09-10","10:00","11:00","NO_SHOW",None),
]

def seed(db_path: str = DB) -> None:
    with sqlite3.connect(db_path) as con, open(SCHEMA, "r", encoding="utf-8") as f:
        con.executescript(f.read())
        con.executemany("""INSERT INTO users
          (user_id, name, email, phone, role) VALUES (?,?,?,?,?)""", USERS)
        con.executemany("""INSERT INTO cars
          (car_id, make, model, year, price, body_type, color, status, featured, created_at)
          VALUES (?,?,?,?,?,?,?,?,?,?)""", CARS)
        con.executemany("""INSERT INTO test_drives
          (booking_id, car_id, user_id, booking_date, start_time, end_time, status, notes)
          VALUES (?,?,?,?,?,?,?,?)""", TEST_DRIVES)

if __name__ == "__main__":
    if os.path.exists(DB):
        os.remove(DB)
    seed(DB)
    print("Seeded mock.db")
