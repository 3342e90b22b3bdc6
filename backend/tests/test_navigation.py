# backend/tests/test_navigation.py

from app.core.navigation import NAVIGATION, active_section, flatten_routes


def test_routes_follow_menu_order():
    assert flatten_routes() == [
        "/", "/clients", "/vendors", "/items", "/services", "/technicians",
        "/orders", "/documents", "/payments", "/reports",
    ]


def test_management_group_holds_master_data():
    management = next(entry for entry in NAVIGATION if entry["name"] == "Management")
    assert [child["name"] for child in management["children"]] == [
        "Clients", "Vendors", "Items", "Services", "Technicians",
    ]


def test_active_section():
    assert active_section("/") == "Dashboard"
    assert active_section("/items") == "Items"
    assert active_section("/unknown") == ""
