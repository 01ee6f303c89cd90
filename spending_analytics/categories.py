from __future__ import annotations

from typing import Dict, Optional

from .dates import language_code

CATEGORY_LABELS: Dict[str, Dict[str, str]] = {
    "comida": {"es": "Comida", "en": "Food"},
    "creditos": {"es": "Créditos", "en": "Loans"},
    "educacion": {"es": "Educación", "en": "Education"},
    "finanzas": {"es": "Finanzas", "en": "Finance"},
    "hogar": {"es": "Hogar", "en": "Home"},
    "mascotas": {"es": "Mascotas", "en": "Pets"},
    "mercado": {"es": "Mercado", "en": "Groceries"},
    "ocio": {"es": "Ocio", "en": "Leisure"},
    "personales": {"es": "Artículos personales", "en": "Personal items"},
    "regalos": {"es": "Regalos", "en": "Gifts"},
    "ropa": {"es": "Ropa", "en": "Clothing"},
    "salud": {"es": "Salud", "en": "Health"},
    "servicios": {"es": "Servicios", "en": "Utilities"},
    "transporte": {"es": "Transporte", "en": "Transport"},
    "otros": {"es": "Otros", "en": "Other"},
}


def category_label(category_id: str, language: Optional[str] = None) -> str:
    """Display label for a category id; unknown ids are shown as-is."""
    labels = CATEGORY_LABELS.get(category_id)
    if not labels:
        return category_id
    return labels[language_code(language)]
