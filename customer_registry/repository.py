# repository.py
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from customer_registry.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    InvalidCustomer,
)
from customer_registry.models import Customer

log = logging.getLogger(__name__)

# ==============================================================================
# --- REPOSITORY INTERFACE ---
# ==============================================================================

class BaseCustomerRepository(ABC):
    @abstractmethod
    def get(self, customer_id: int) -> Customer:
        pass

    @abstractmethod
    def list(self) -> Dict[int, Customer]:
        pass

    @abstractmethod
    def create(self, customer: Customer) -> Dict[int, Customer]:
        pass

    @abstractmethod
    def update(self, customer_id: int, customer: Customer) -> Dict[int, Customer]:
        pass

    @abstractmethod
    def update_many(self, customers: List[Customer]) -> Dict[int, Customer]:
        pass

    @abstractmethod
    def delete(self, customer_id: int) -> Dict[int, Customer]:
        pass

# ==============================================================================
# --- IN-MEMORY REPOSITORY ---
# ==============================================================================

class InMemoryCustomerRepository(BaseCustomerRepository):
    """Process-lifetime registry guarded by a single lock.

    Every public method holds the lock for its whole body, so a batch update
    is never interleaved with another request. Methods that return the
    registry return a copy sorted by id.
    """

    def __init__(self, customers: Optional[Iterable[Customer]] = None):
        self._customers: Dict[int, Customer] = {}
        self._lock = threading.RLock()
        for customer in customers or ():
            self._customers[customer.customer_id] = customer

    def _snapshot(self) -> Dict[int, Customer]:
        return {cid: self._customers[cid] for cid in sorted(self._customers)}

    def _require(self, customer_id: int) -> Customer:
        customer = self._customers.get(customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)
        return customer

    def get(self, customer_id: int) -> Customer:
        with self._lock:
            return self._require(customer_id)

    def list(self) -> Dict[int, Customer]:
        with self._lock:
            return self._snapshot()

    def create(self, customer: Customer) -> Dict[int, Customer]:
        with self._lock:
            if customer.customer_id in self._customers:
                raise CustomerAlreadyExists(customer.customer_id)
            self._customers[customer.customer_id] = customer
            log.info("Created customer %s", customer.customer_id)
            return self._snapshot()

    def update(self, customer_id: int, customer: Customer) -> Dict[int, Customer]:
        with self._lock:
            self._require(customer_id)
            if customer.missing_fields():
                raise InvalidCustomer("All fields (Name, Role, Email, Phone) are required")
            # The path id wins over whatever ID the body carried
            self._customers[customer_id] = customer.model_copy(update={"customer_id": customer_id})
            log.info("Updated customer %s", customer_id)
            return self._snapshot()

    def update_many(self, customers: List[Customer]) -> Dict[int, Customer]:
        with self._lock:
            for customer in customers:
                # Records applied before a missing id stay applied
                self._require(customer.customer_id)
                self._customers[customer.customer_id] = customer
                log.info("Batch updated customer %s", customer.customer_id)
            return self._snapshot()

    def delete(self, customer_id: int) -> Dict[int, Customer]:
        with self._lock:
            self._require(customer_id)
            del self._customers[customer_id]
            log.info("Deleted customer %s", customer_id)
            return self._snapshot()

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)
