"""Product API messages and listing limits."""

PRODUCT_NOT_FOUND = "El producto no existe."
PRODUCT_DELETED = "Success: Producto eliminado"

INVALID_ID = "ID no válido."
NAME_REQUIRED = "El nombre del producto es obligatorio."
NAME_TOO_LONG = "El nombre del producto no puede superar los 100 caracteres."
PRICE_INVALID = "El precio no es válido."
PRICE_REQUIRED = "El precio del producto es obligatorio."
AVAILABILITY_INVALID = "El valor de disponibilidad no es válido."

NAME_MAX_LENGTH = 100

LIST_LIMIT = 50
LIST_ORDERING = ("-price", "id")
