from typing import Optional

# Raw unit type (English or already Spanish) -> Spanish singular/plural labels.
UNIT_TYPE_MAPPINGS = {
    "Unit": ("Unidad", "Unidades"),
    "Box": ("Caja", "Cajas"),
    "Grams": ("Gramo", "Gramos"),
    "Kg": ("Kilogramo", "Kilogramos"),
    "Liters": ("Litro", "Litros"),
    "Pieces": ("Pieza", "Piezas"),
    "Meters": ("Metro", "Metros"),
    "Unidad": ("Unidad", "Unidades"),
    "Caja": ("Caja", "Cajas"),
    "Gramo": ("Gramo", "Gramos"),
    "Gramos": ("Gramo", "Gramos"),
    "Kilogramo": ("Kilogramo", "Kilogramos"),
    "Kilogramos": ("Kilogramo", "Kilogramos"),
    "Litro": ("Litro", "Litros"),
    "Litros": ("Litro", "Litros"),
    "Pieza": ("Pieza", "Piezas"),
    "Piezas": ("Pieza", "Piezas"),
    "Metro": ("Metro", "Metros"),
    "Metros": ("Metro", "Metros"),
}

_DEFAULT_LABELS = UNIT_TYPE_MAPPINGS["Unidad"]


def map_unit_type(unit_type: Optional[str], amount=1) -> str:
    """Spanish label for ``unit_type``: singular only when ``amount == 1``.

    A missing unit type reads as "Unidad"; an unknown one is returned as is.
    """
    if not unit_type:
        labels = _DEFAULT_LABELS
    else:
        labels = UNIT_TYPE_MAPPINGS.get(unit_type)
        if labels is None:
            return unit_type
    singular, plural = labels
    return singular if amount == 1 else plural


def spanish_unit_types() -> list[str]:
    return ["Unidades", "Cajas", "Gramos", "Kilogramos", "Litros", "Piezas", "Metros"]
