class BadgeValidationError(Exception):
    """Entrada mal formada para una acción del panel (se rechaza antes de tocar la DB)."""

class PersistenceError(Exception):
    """Fallo de la base de datos; la operación en curso se revirtió completa."""

class BestEffortCleanupError(Exception):
    """Fallo al purgar badges durante el teardown de una tienda. Nunca se propaga."""

    def __init__(self, shop: str, cause: Exception):
        super().__init__(f"badge cleanup failed for {shop}: {cause}")
        self.shop = shop
        self.cause = cause
