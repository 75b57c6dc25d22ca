"""Order workflow: placing, reading, re-lining and deleting orders.

``OrderWorkflow`` is handed its repository at construction and holds no other
state, so one instance per request (or per command) is the norm. It is the
only place that decides which failures are the caller's fault and which are
storage's:

* a malformed request, or one that names the same product twice, raises
  :class:`InvalidOrderRequest` before anything is written;
* a rule that fails while writing (unknown user or product, uniqueness)
  raises :class:`ConstraintViolation`;
* anything else raised by storage becomes :class:`StorageFailure`.

A missing order is not a failure: reads and updates answer ``None`` and
deletes answer ``False``.
"""

from collections.abc import Iterable, Mapping
from contextlib import contextmanager

from protean.exceptions import ExpectedVersionError, TransactionError, ValidationError
from protean.utils.globals import current_domain

from storefront.ordering.order import Order, build_order_lines
from storefront.ordering.views import OrderView
from storefront.shared.errors import ConstraintViolation, InvalidOrderRequest, StorageFailure, StorefrontError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def _rejecting_invalid_input():
    try:
        yield
    except ValidationError as exc:
        raise InvalidOrderRequest(exc.messages) from exc


_CONSTRAINT_FAILURES = ("IntegrityError", "UniqueViolation", "ForeignKeyViolation")


@contextmanager
def storage_errors(operation: str, **context):
    """Translate anything storage raises inside the block into the error taxonomy.

    Covers commit-time failures too: Protean reports those as
    ``TransactionError`` (or ``ExpectedVersionError`` for a lost update race).
    """
    try:
        yield
    except StorefrontError:
        raise
    except ValidationError as exc:
        logger.warning("order_constraint_violation", operation=operation, errors=exc.messages, **context)
        raise ConstraintViolation(exc.messages) from exc
    except ExpectedVersionError as exc:
        logger.warning("order_version_conflict", operation=operation, **context)
        raise ConstraintViolation({"_entity": [str(exc)]}) from exc
    except TransactionError as exc:
        original = (exc.extra_info or {}).get("original_exception")
        if original in _CONSTRAINT_FAILURES:
            logger.warning("order_constraint_violation", operation=operation, errors=str(exc), **context)
            raise ConstraintViolation({"_entity": [str(exc)]}) from exc
        logger.exception("order_storage_failure", operation=operation, **context)
        raise StorageFailure({"_entity": [f"{operation} failed: {exc}"]}) from exc
    except Exception as exc:
        logger.exception("order_storage_failure", operation=operation, **context)
        raise StorageFailure({"_entity": [f"{operation} failed: {exc}"]}) from exc


class OrderWorkflow:
    def __init__(self, repository):
        self.repository = repository

    def create_order(self, user_id, lines: Iterable[Mapping]) -> OrderView:
        """Place a new order for ``user_id`` with one line per entry in ``lines``.

        Quantities and prices are stored exactly as given.
        """
        with _rejecting_invalid_input():
            order = Order.place(user_id=user_id, lines=build_order_lines(lines))

        with storage_errors("create_order", user_id=str(user_id)):
            self.repository.insert(order)

        logger.info("order_placed", order_id=str(order.id), user_id=str(user_id), lines=len(order.lines))
        return OrderView.from_order(order)

    def get_order(self, order_id) -> OrderView | None:
        with storage_errors("get_order", order_id=str(order_id)):
            loaded = self.repository.find_by_id(order_id, with_lines=True, with_product=True, with_user=True)

        if loaded is None:
            return None
        return OrderView.from_loaded(loaded)

    def update_order(self, order_id, lines: Iterable[Mapping]) -> OrderView | None:
        """Replace the order's whole line set with ``lines``.

        No diffing against the current lines and no version check: the last
        update to land wins.
        """
        with storage_errors("update_order", order_id=str(order_id)):
            loaded = self.repository.find_by_id(order_id, with_lines=True)
        if loaded is None:
            return None

        with _rejecting_invalid_input():
            new_lines = build_order_lines(lines)

        with storage_errors("update_order", order_id=str(order_id)):
            order = self.repository.replace_lines(loaded.order, new_lines)

        logger.info("order_lines_replaced", order_id=str(order.id), lines=len(order.lines))
        return OrderView.from_order(order)

    def delete_order(self, order_id) -> bool:
        with storage_errors("delete_order", order_id=str(order_id)):
            loaded = self.repository.find_by_id(order_id, with_lines=True)
            if loaded is None:
                return False
            self.repository.delete(loaded.order)

        logger.info("order_deleted", order_id=str(order_id))
        return True


def order_workflow() -> OrderWorkflow:
    """Workflow bound to the active domain's order repository."""
    return OrderWorkflow(current_domain.repository_for(Order))
