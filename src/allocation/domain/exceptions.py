class DomainException(Exception):
    """Domain-related exceptions."""
    default_msg = 'Domain rule violated.'

    def __init__(self, msg=None):
        self.msg = msg if msg is not None else self.default_msg
        super().__init__(self.msg)


class InvalidSKU(DomainException):
    """Error raised when an order line or a batch does not belong to the
    product it is being handled by.

    Args:
        msg (str, optional): The error message to be displayed. If not provided,
            a default message will be used.
        sku (str, optional): The offending SKU. If provided, a detailed error
            message will be constructed using this information.

    Attributes:
        msg (str): The error message to be displayed.
    """
    default_msg = 'This SKU does not belong to the product.'

    def __init__(self, msg=None, sku=None):
        if msg is None and sku is not None:
            msg = f"SKU '{sku}' does not belong to the product."
        super().__init__(msg)


class OutOfStock(DomainException):
    """Error raised when trying to allocate an order line, but there is not
    available quantity either in stock or in shipments.

    Args:
        msg (str, optional): The error message to be displayed. If not provided,
            a default message will be used.
        sku (str, optional): The SKU of the product. If provided, a detailed
            error message will be constructed using this information.

    Attributes:
        msg (str): The error message to be displayed.
    """
    default_msg = 'Out of stock for this SKU.'

    def __init__(self, msg=None, sku=None):
        if msg is None and sku is not None:
            msg = f"Out of stock for SKU '{sku}'."
        self.sku = sku
        super().__init__(msg)


class LineIsNotAllocatedError(DomainException):
    """Error raised when trying to deallocate an order line that has not been
    allocated previously.

    Args:
        msg (str, optional): The error message to be displayed. If not provided,
            a default message will be used.
        line_info (Tuple[str, str], optional): A tuple containing the `order_id`
            and `sku`. If provided, a detailed error message will be
            constructed using this information.

    Attributes:
        msg (str): The error message to be displayed.
    """
    default_msg = 'This line is not allocated to any batches.'

    def __init__(self, msg=None, line_info=None):
        if msg is None and line_info is not None:
            order_id, sku = line_info
            msg = f"Line with SKU '{sku}' for order '{order_id}'" \
                  " is not allocated to any batches."
        super().__init__(msg)


class DuplicateBatch(DomainException):
    """Error raised when appending a batch whose reference is already part of
    the product."""
    default_msg = 'This batch is already part of the product.'

    def __init__(self, msg=None, ref=None):
        if msg is None and ref is not None:
            msg = f"Batch with reference '{ref}' is already part of the product."
        super().__init__(msg)


class ValidationError(Exception):
    """Error raised when trying to set an invalid attribute to a value object."""

    def __init__(self, msg):
        self.msg = msg
        super().__init__(self.msg)


class InvalidTypeForQuantity(ValidationError):
    """Error raised when trying to set a non-integer value to a quantity attribute."""
    def __init__(self, msg='Quantity value must be an integer.'):
        super().__init__(msg)


class InvalidQuantity(ValidationError):
    """Error raised when trying to set an invalid quantity."""
    def __init__(self, msg='Quantity value must be >= 1.'):
        super().__init__(msg)


class RepositoryException(Exception):
    """Storage-related exceptions."""

    def __init__(self, msg):
        self.msg = msg
        super().__init__(self.msg)


class InexistentProduct(RepositoryException):
    """Error raised when trying to read a Product aggregate that does not exist.

    Args:
        msg (str, optional): The error message to be displayed. If not provided,
            a default message will be used.
        sku (str, optional): The SKU of the product. If provided, a detailed
            error message will be constructed using this information.

    Attributes:
        msg (str): The error message to be displayed.
    """
    def __init__(self, msg=None, sku=None):
        if msg is None and sku is None:
            msg = 'This SKU does not exist.'
        elif msg is None:
            msg = f"SKU '{sku}' does not exist."
        self.sku = sku
        super().__init__(msg)


class ProductAlreadyExists(RepositoryException):
    """Error raised when writing a Product aggregate whose SKU is already stored."""
    def __init__(self, msg=None, sku=None):
        if msg is None and sku is None:
            msg = 'This SKU already exists.'
        elif msg is None:
            msg = f"SKU '{sku}' already exists."
        self.sku = sku
        super().__init__(msg)


class ServiceError(Exception):
    """Error raised by the service layer, wrapping the error that caused it.

    Attributes:
        error (Exception): The repository or domain error that was raised.
        msg (str): The error message to be displayed.
    """
    prefix = 'Service error'

    def __init__(self, error: Exception):
        self.error = error
        self.msg = f'{self.prefix}: {getattr(error, "msg", error)}'
        super().__init__(self.msg)


class RepositoryError(ServiceError):
    """The repository failed to read or store a product."""
    prefix = 'Repository error'


class ProcessingError(ServiceError):
    """A domain rule prevented the operation."""
    prefix = 'Processing error'
