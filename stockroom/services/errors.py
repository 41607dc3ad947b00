"""
Erreurs du moteur d'achat.

Chaque erreur porte un `code` stable (exposé au client) et un `message`.
Les endpoints les traduisent en HTTPException ; rien n'est retenté.
"""

from __future__ import annotations


class PurchaseError(Exception):
    code = "purchase_error"
    message = "Purchase failed"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


class ValidationError(PurchaseError):
    """Requête mal formée : détectée avant toute écriture."""

    code = "invalid_request"
    message = "Invalid request"


class InsufficientStockOrUnknownItem(PurchaseError):
    """Au moins une décrémentation conditionnelle n'a touché aucune ligne."""

    code = "insufficient_stock_or_invalid_item"
    message = "Insufficient stock or invalid item"

    def __init__(self, lines: list[int] | None = None):
        super().__init__()
        self.lines = list(lines or [])

    def to_detail(self) -> dict:
        detail = super().to_detail()
        detail["lines"] = self.lines
        return detail


class StorageError(PurchaseError):
    """Échec côté base : le détail reste dans les logs serveur."""

    code = "storage_error"
    message = "Internal Server Error"
