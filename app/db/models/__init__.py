from app.db.models.kitchen import Kitchen
from app.db.models.restaurant import Restaurant

__all__ = ["Kitchen", "Restaurant"]
