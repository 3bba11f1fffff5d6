from app.models.address import Address
from app.models.customer import Customer

__all__ = ["Address", "Customer"]
