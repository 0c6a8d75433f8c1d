# routes.py
import logging
from typing import Annotated, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, status
from pydantic import TypeAdapter, ValidationError

from customer_registry.exceptions import CustomerRegistryError
from customer_registry.models import Customer, seed_customers
from customer_registry.repository import BaseCustomerRepository, InMemoryCustomerRepository

log = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["Customers"])

# The registry lives for as long as the process does
customer_repo = InMemoryCustomerRepository(seed_customers())

_customer_list = TypeAdapter(List[Customer])


def get_customer_repo() -> BaseCustomerRepository:
    return customer_repo


def parse_customer_id(
    customer_id: Annotated[str, Path(pattern=r"^\+?[0-9]+$", description="Customer ID (0-255)")],
) -> int:
    digits = customer_id.lstrip("+").lstrip("0") or "0"
    # Leading zeros are fine; anything over three significant digits is out of range
    if len(digits) > 3 or int(digits) > 255:
        log.warning("Rejected customer ID %s", customer_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid customer ID")
    return int(digits)


CustomerId = Annotated[int, Depends(parse_customer_id)]


# Bodies are decoded from the raw request whatever its Content-Type says
async def customer_body(request: Request) -> Customer:
    try:
        return Customer.model_validate_json(await request.body())
    except ValidationError as e:
        raise _bad_payload(e)


async def customer_list_body(request: Request) -> List[Customer]:
    try:
        return _customer_list.validate_json(await request.body())
    except ValidationError as e:
        raise _bad_payload(e)


def _bad_payload(exc: ValidationError) -> HTTPException:
    log.warning("Rejected payload: %d error(s)", exc.error_count())
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request payload")


def _registry_response(customers: Dict[int, Customer]) -> Dict[str, Customer]:
    return {str(cid): customer for cid, customer in customers.items()}


def _http_error(exc: CustomerRegistryError) -> HTTPException:
    log.warning("Rejected request: %s", exc)
    return HTTPException(status_code=exc.status_code, detail=str(exc))


@router.get("", response_model=Dict[str, Customer])
def list_customers(repo: BaseCustomerRepository = Depends(get_customer_repo)):
    return _registry_response(repo.list())


@router.post("", response_model=Dict[str, Customer], status_code=status.HTTP_201_CREATED)
def create_customer(
    customer: Customer = Depends(customer_body),
    repo: BaseCustomerRepository = Depends(get_customer_repo),
):
    try:
        return _registry_response(repo.create(customer))
    except CustomerRegistryError as e:
        raise _http_error(e)


# Registered before the /{customer_id} routes so "batch" is never read as an id
@router.post("/batch", response_model=Dict[str, Customer])
def update_customers_batch(
    customers: List[Customer] = Depends(customer_list_body),
    repo: BaseCustomerRepository = Depends(get_customer_repo),
):
    """Overwrite existing customers in array order.

    Stops at the first ID that is not registered and answers 404; customers
    before it in the array keep their new values.
    """
    try:
        return _registry_response(repo.update_many(customers))
    except CustomerRegistryError as e:
        raise _http_error(e)


@router.get("/{customer_id}", response_model=Customer)
def get_customer(customer_id: CustomerId, repo: BaseCustomerRepository = Depends(get_customer_repo)):
    try:
        return repo.get(customer_id)
    except CustomerRegistryError as e:
        raise _http_error(e)


@router.post("/{customer_id}", response_model=Dict[str, Customer], status_code=status.HTTP_201_CREATED)
def update_customer(
    customer_id: CustomerId,
    customer: Customer = Depends(customer_body),
    repo: BaseCustomerRepository = Depends(get_customer_repo),
):
    try:
        return _registry_response(repo.update(customer_id, customer))
    except CustomerRegistryError as e:
        raise _http_error(e)


@router.delete("/{customer_id}", response_model=Dict[str, Customer])
def delete_customer(customer_id: CustomerId, repo: BaseCustomerRepository = Depends(get_customer_repo)):
    try:
        return _registry_response(repo.delete(customer_id))
    except CustomerRegistryError as e:
        raise _http_error(e)
