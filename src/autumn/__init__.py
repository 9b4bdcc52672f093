"""Autumn - async Python client for the Autumn billing and entitlements API.

Every operation can be called on a configured client, or straight from the
package using the ``AUTUMN_SECRET_KEY`` / ``AUTUMN_PUBLISHABLE_KEY``
environment variables.

Example:
    ```python
    import autumn
    from autumn import Autumn

    # Environment credentials
    result = await autumn.check(customer_id="cus_123", feature_id="messages")

    # Explicit credentials
    client = Autumn(secret_key="am_sk_123")
    result = await client.attach(customer_id="cus_123", product_id="pro")
    customer = await client.customers.get(customer_id="cus_123", expand=["invoices"])

    if result.error:
        print(f"{result.error.code}: {result.error.message}")
    ```
"""

from autumn.auth import LATEST_API_VERSION, CredentialError, CredentialNotFoundError
from autumn.client import AUTUMN_API_URL, Autumn
from autumn.errors import APIError, AutumnError, ErrorDetail, Result

__version__ = "0.1.0"

checkout = Autumn.checkout
attach = Autumn.attach
usage = Autumn.usage
setup_payment = Autumn.setup_payment
cancel = Autumn.cancel
check = Autumn.check
track = Autumn.track
query = Autumn.query

customers = Autumn.customers
entities = Autumn.entities
products = Autumn.products
referrals = Autumn.referrals
features = Autumn.features

__all__ = [
    "AUTUMN_API_URL",
    "LATEST_API_VERSION",
    "APIError",
    "Autumn",
    "AutumnError",
    "CredentialError",
    "CredentialNotFoundError",
    "ErrorDetail",
    "Result",
    "__version__",
    "attach",
    "cancel",
    "check",
    "checkout",
    "customers",
    "entities",
    "features",
    "products",
    "query",
    "referrals",
    "setup_payment",
    "track",
    "usage",
]
