"""
Gestion des clients plateforme: recherche par email, création à la demande.
"""
import logging
from typing import Callable, Optional

from subscribepro_checkout.exceptions import PlatformCustomerNotFoundError
from subscribepro_checkout.platform.client import PlatformClient, get_platform_client
from subscribepro_checkout.platform.models import PlatformCustomer

logger = logging.getLogger(__name__)

CUSTOMERS_PATH = "/services/v2/customers.json"
CUSTOMER_PATH = "/services/v2/customer.json"

# module subscribepro_checkout.platform.customer
class PlatformCustomerManager:
    def __init__(self, client_factory: Callable[..., PlatformClient] = get_platform_client):
        self.client_factory = client_factory

    def load_customers_by_email(self, email: str, website_id=None) -> list:
        data = self.client_factory(website_id).get(CUSTOMERS_PATH, params={"email": email})
        return [PlatformCustomer.from_dict(c) for c in (data.get("customers") or [])]

    def create_customer(
        self,
        email: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        website_id=None,
    ) -> PlatformCustomer:
        customer = PlatformCustomer(email=email, first_name=first_name, last_name=last_name)
        data = self.client_factory(website_id).post(CUSTOMER_PATH, {"customer": customer.to_dict()})
        created = PlatformCustomer.from_dict(data.get("customer") or {})
        logger.info("platform.customer created id=%s email=%s", created.id, email)
        return created

    def get_customer(
        self,
        email: str,
        create_if_not_exist: bool = False,
        website_id=None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> PlatformCustomer:
        """
        Premier client plateforme correspondant à l'email.
        - Aucun client + create_if_not_exist: création (email, prénom/nom optionnels)
        - Aucun client sinon: PlatformCustomerNotFoundError
        """
        customers = self.load_customers_by_email(email, website_id)
        if customers:
            return customers[0]
        if not create_if_not_exist:
            raise PlatformCustomerNotFoundError(email)
        return self.create_customer(email, first_name, last_name, website_id)
