"""Customer repository: identification by name + date of birth."""
import logging
from pathlib import Path
from typing import Dict, Optional
from uuid import uuid4

from bowl.domain.Customer import Customer
from bowl.infra.paths import CUSTOMERS_FILENAME, data_file
from bowl.infra.storage import atomic_write, read_json, write_lock

logger = logging.getLogger(__name__)


class CustomerRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.path = data_file(CUSTOMERS_FILENAME, data_dir)

    def get_all(self) -> Dict[str, Customer]:
        return {c.id: c for c in (Customer.from_dict(row) for row in read_json(self.path, []))}

    def get(self, customer_id: str) -> Optional[Customer]:
        return self.get_all().get(customer_id)

    def find_or_create(self, name: str, date_of_birth: str) -> Customer:
        with write_lock:
            customers = self.get_all()
            for customer in customers.values():
                if customer.matches(name, date_of_birth):
                    return customer
            customer = Customer(str(uuid4()), name.strip(), date_of_birth)
            customers[customer.id] = customer
            atomic_write(self.path, [c.to_dict() for c in customers.values()])
        logger.info(f"Customer created: {customer}")
        return customer
