"""Sample Data — demo rows seeded into empty lists when seed_demo_data is on.

Invariants:
    - Pure builders: callers pass ids, coordinates and clock; nothing is stored here
    - Each builder returns storage-shaped dicts (snake_case column names)

Design Decisions:
    - Kept apart from routes so seeding can be switched off per deployment
      without touching endpoint code
"""

from datetime import datetime

from signo_connect.core.route_estimates import Coordinate, interpolate


def sample_notifications(user_id: int, user_type: str) -> list[dict]:
    """Three notifications: a job alert, a document reminder and a payment."""
    base = {"user_id": user_id, "user_type": user_type}
    return [
        {
            **base,
            "title": "New Job Posted",
            "content": "A new job matching your profile has been posted in your area.",
            "type": "job",
            "action_url": "/jobs",
        },
        {
            **base,
            "title": "Pending Document Verification",
            "content": "Your documents are pending verification. Please complete the process.",
            "type": "system",
            "action_url": "/profile/documents",
        },
        {
            **base,
            "title": "Payment Received",
            "content": "You have received a payment of ₹5,000 for completed trip #123.",
            "type": "payment",
            "action_url": "/payments",
        },
    ]


def sample_referrals(referrer_id: int, now: datetime) -> list[dict]:
    return [
        {
            "referrer_id": referrer_id,
            "referred_phone_number": "+919876543210",
            "referred_name": "Rahul Kumar",
            "status": "registered",
            "reward": "₹500",
        },
        {
            "referrer_id": referrer_id,
            "referred_phone_number": "+919876543211",
            "referred_name": "Suresh Singh",
            "status": "completed",
            "reward": "₹1000",
            "completed_at": now,
        },
        {
            "referrer_id": referrer_id,
            "referred_phone_number": "+919876543212",
            "referred_name": "Amit Patel",
            "status": "pending",
            "reward": None,
        },
    ]


def sample_fuel_pumps(near: Coordinate) -> list[dict]:
    """Three pumps within ~3 km of the given point."""
    lat, lng = near
    return [
        {
            "name": "Indian Oil",
            "address": "Airport Road, Delhi",
            "latitude": lat + 0.01,
            "longitude": lng + 0.01,
            "amenities": ["Restaurant", "Restroom", "Convenience Store"],
            "fuel_types": ["Petrol", "Diesel", "CNG"],
            "is_open_24_hours": True,
            "rating": 4.2,
        },
        {
            "name": "Bharat Petroleum",
            "address": "NH-8, Delhi",
            "latitude": lat - 0.01,
            "longitude": lng - 0.01,
            "amenities": ["ATM", "Restroom"],
            "fuel_types": ["Petrol", "Diesel"],
            "is_open_24_hours": False,
            "rating": 3.8,
        },
        {
            "name": "Hindustan Petroleum",
            "address": "MG Road, Delhi",
            "latitude": lat + 0.02,
            "longitude": lng - 0.02,
            "amenities": ["Service Station", "Restroom", "Car Wash"],
            "fuel_types": ["Petrol", "Diesel"],
            "is_open_24_hours": True,
            "rating": 4.0,
        },
    ]


def sample_tolls(start: Coordinate, end: Coordinate) -> list[dict]:
    """Three toll plazas at 25%, 50% and 75% of the straight line start→end."""
    plazas = [
        ("Mumbai-Pune Expressway Toll", 230.0, "Mumbai-Pune Expressway",
         ["Cash", "FASTag", "Credit Card"]),
        ("Nashik Highway Toll", 185.0, "NH-3", ["Cash", "FASTag"]),
        ("Delhi-Jaipur Highway Toll", 220.0, "NH-8", ["Cash", "FASTag", "UPI"]),
    ]
    tolls = []
    for fraction, (name, fee, highway, methods) in zip((0.25, 0.5, 0.75), plazas):
        lat, lng = interpolate(start, end, fraction)
        tolls.append({
            "name": name,
            "latitude": lat,
            "longitude": lng,
            "fee_amount": fee,
            "highway": highway,
            "payment_methods": methods,
        })
    return tolls


def sample_vehicle(
    registration_number: str, transporter_id: int, now: datetime,
) -> dict:
    return {
        "registration_number": registration_number,
        "transporter_id": transporter_id,
        "vehicle_type": "Truck",
        "make": "Tata",
        "model": "Prima",
        "year": 2022,
        "capacity_tons": 25.0,
        "insurance_status": "Active",
        "last_service_date": now,
    }
