# storefront/utils/retry.py
from sqlalchemy.exc import OperationalError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from storefront.utils.settings import CHECKOUT_RETRY_ATTEMPTS


def db_retry(attempts: int = CHECKOUT_RETRY_ATTEMPTS):
    """
    Retry a whole unit of work on transient contention
    (sqlite "database is locked", postgres serialization failure / deadlock).
    Domain errors are not OperationalError, so they propagate immediately.
    """
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.05, min=0.05, max=1),
        retry=retry_if_exception_type(OperationalError),
    )
