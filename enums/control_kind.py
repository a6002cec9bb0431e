from enum import Enum


class ControlKind(Enum):
    # Accepts a direct value assignment (text inputs, textareas, checkboxes)
    SCALAR = "scalar"
    # Value is chosen among options (single or multi select)
    CHOICE = "choice"
