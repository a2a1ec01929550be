class DomainException(Exception):
    pass


class ProductServiceUnavailableError(DomainException):
    def __init__(self, message: str = "Product service is currently unavailable. Cannot reduce quantity."):
        super().__init__(message)


class OutOfStockError(DomainException):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} is out of stock.")


class OrderNotFoundError(DomainException):
    def __init__(self, message: str = "Order not found or has been deleted"):
        super().__init__(message)


class InvalidOrderStatusError(DomainException):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid order status: {value}")
