from fastapi import APIRouter

from bowl.infra.Customer_Repository import CustomerRepository
from bowl.utilities.validators import CustomerLoginInput

router = APIRouter(prefix="/api/customers")


@router.post("/login")
def login_customer(payload: CustomerLoginInput):
    """Find the customer by name + date of birth, creating it on first login.

    The client keeps the returned id as its session until it logs out.
    """
    customer = CustomerRepository().find_or_create(payload.name, payload.date_of_birth)
    return customer.to_dict()
