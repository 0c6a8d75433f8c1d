# exceptions.py

# Raised by the repository; routes turn them into HTTP responses via status_code
class CustomerRegistryError(ValueError):
    status_code = 400


# A required field of the submitted customer is empty
class InvalidCustomer(CustomerRegistryError):
    status_code = 400


class CustomerNotFound(CustomerRegistryError):
    status_code = 404

    def __init__(self, customer_id: int):
        super().__init__("Customer not found")
        self.customer_id = customer_id


class CustomerAlreadyExists(CustomerRegistryError):
    status_code = 409

    def __init__(self, customer_id: int):
        super().__init__("Customer with this ID already exists")
        self.customer_id = customer_id
