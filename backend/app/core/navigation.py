# backend/app/core/navigation.py
"""
Menú de navegación estático del panel.

La lista no depende de datos: describe las rutas de listado de cada
entidad agrupadas como en la cabecera del panel.
"""

from typing import Any, Dict, List

NAVIGATION: List[Dict[str, Any]] = [
    {"name": "Dashboard", "href": "/"},
    {
        "name": "Management",
        "children": [
            {"name": "Clients", "href": "/clients"},
            {"name": "Vendors", "href": "/vendors"},
            {"name": "Items", "href": "/items"},
            {"name": "Services", "href": "/services"},
            {"name": "Technicians", "href": "/technicians"},
        ],
    },
    {"name": "Orders", "href": "/orders"},
    {"name": "Documents", "href": "/documents"},
    {"name": "Payments", "href": "/payments"},
    {"name": "Reports", "href": "/reports"},
]


def flatten_routes(entries: List[Dict[str, Any]] = NAVIGATION) -> List[str]:
    """Devuelve todas las rutas del menú en orden de aparición."""
    routes: List[str] = []
    for entry in entries:
        if "children" in entry:
            routes.extend(flatten_routes(entry["children"]))
        else:
            routes.append(entry["href"])
    return routes


def active_section(path: str) -> str:
    """Nombre de la entrada que corresponde a `path`, o cadena vacía si ninguna."""
    for entry in NAVIGATION:
        for child in entry.get("children", [entry]):
            if child.get("href") == path:
                return child["name"]
    return ""
