"""Exercise a running server end to end.

Needs an owner account (see scripts/create_owner.py):

    python -m scripts.smoke_api <username> <password>
"""
import requests
import sys
from datetime import datetime, timedelta, timezone

BASE_URL = "http://localhost:10000"


def login(session: requests.Session, username: str, password: str):
    print("\n=== Login ===")
    response = session.post(f"{BASE_URL}/api/auth/login", json={
        "username": username,
        "password": password,
        "callbackUrl": "/reports"
    })
    print("Login:", response.status_code, response.json().get("redirectTo"))
    response.raise_for_status()


def test_customer_apis(session: requests.Session) -> dict:
    print("\n=== Testing Customer APIs ===")
    response = session.post(f"{BASE_URL}/api/customers/", json={
        "name": "Smoke Test Customer",
        "phone": "07700900123"
    })
    print("Create Customer:", response.status_code)
    customer = response.json()

    response = session.get(f"{BASE_URL}/api/customers/{customer['customerId']}")
    print("Get Customer by ID:", response.status_code)

    response = session.get(f"{BASE_URL}/api/customers/")
    print("Get All Customers:", response.status_code)
    return customer


def test_service_apis(session: requests.Session) -> dict:
    print("\n=== Testing Service APIs ===")
    response = session.post(f"{BASE_URL}/api/services/", json={
        "name": "Smoke Test Service",
        "price": 45,
        "duration": 60,
        "category": "Hair"
    })
    print("Create Service:", response.status_code)
    service = response.json()

    response = session.get(f"{BASE_URL}/api/services/categories")
    print("Get Categories:", response.status_code, response.json())
    return service


def test_transaction_apis(session: requests.Session, customer: dict, service: dict):
    print("\n=== Testing Transaction APIs ===")
    me = session.get(f"{BASE_URL}/api/auth/session").json()
    sale = {
        "customer": {"id": customer["customerId"], "name": customer["name"]},
        "therapist": {"id": me["userId"], "name": me["username"]},
        "items": [{"name": service["name"], "category": service["category"], "price": service["price"], "quantity": 1}],
        "subtotal": service["price"],
        "discount": 5,
        "total": service["price"] - 5,
        "paymentMethod": "CASH"
    }
    response = session.post(f"{BASE_URL}/api/transactions/", json=sale)
    print("Create Transaction:", response.status_code)

    bad_sale = dict(sale, total=sale["total"] - 5)
    response = session.post(f"{BASE_URL}/api/transactions/", json=bad_sale)
    print("Create Inconsistent Transaction (expect 400):", response.status_code, response.json().get("detail"))


def test_appointment_apis(session: requests.Session, customer: dict, service: dict):
    print("\n=== Testing Appointment APIs ===")
    start = datetime.now(timezone.utc) + timedelta(days=1)
    response = session.post(f"{BASE_URL}/api/appointments/", json={
        "customerId": customer["customerId"],
        "services": [{"serviceId": service["serviceId"], "price": service["price"]}],
        "startTime": start.isoformat(),
        "endTime": (start + timedelta(hours=1)).isoformat()
    })
    print("Create Appointment:", response.status_code)
    appointment = response.json()

    response = session.put(f"{BASE_URL}/api/appointments/{appointment['appointmentId']}", json={"status": "completed"})
    print("Update Appointment:", response.status_code)


def test_report_apis(session: requests.Session):
    print("\n=== Testing Report APIs ===")
    now = datetime.now(timezone.utc)
    response = session.post(f"{BASE_URL}/api/reports/summary", json={
        "startDate": (now - timedelta(days=1)).isoformat(),
        "endDate": (now + timedelta(days=1)).isoformat()
    })
    print("Summary Report:", response.status_code, response.json().get("summary"))

    response = session.get(f"{BASE_URL}/api/reports/unique")
    print("Unique Values:", response.status_code)


def main():
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    session = requests.Session()
    try:
        login(session, sys.argv[1], sys.argv[2])
        customer = test_customer_apis(session)
        service = test_service_apis(session)
        test_transaction_apis(session, customer, service)
        test_appointment_apis(session, customer, service)
        test_report_apis(session)

        print("\nAll API tests completed!")

    except requests.exceptions.ConnectionError:
        print(f"Error: Could not connect to the server. Make sure the server is running on {BASE_URL}")
    except requests.exceptions.HTTPError as e:
        print(f"Error: {str(e)}")


if __name__ == "__main__":
    main()
