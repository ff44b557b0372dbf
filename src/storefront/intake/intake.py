"""OrderIntake — stub boundary for custom-order requests.

Owns the transient form the visitor types into. A submitted request is only
acknowledged and logged; handing it to a real order-processing service is
outside the storefront.
"""

from uuid import uuid4

import structlog
from protean.exceptions import ValidationError

from storefront.intake.form import FORM_FIELDS, CustomOrderForm
from storefront.notifier.port import NotifierPort
from storefront.selection.state import SelectionState

logger = structlog.get_logger(__name__)

ACKNOWLEDGEMENT_MESSAGE = "Заявка отправлена! Мы свяжемся с вами в ближайшее время."


class OrderIntake:
    def __init__(self, notifier: NotifierPort, selection: SelectionState):
        self._notifier = notifier
        self._selection = selection
        self._form = CustomOrderForm.empty()

    @property
    def form(self) -> CustomOrderForm:
        return self._form

    def edit(self, **fields) -> CustomOrderForm:
        unknown = sorted(set(fields) - set(FORM_FIELDS))
        if unknown:
            raise ValidationError({name: ["Unknown custom order field"] for name in unknown})

        self._form = CustomOrderForm(**{**self._form.to_dict(), **fields})
        return self._form

    def submit(self, form) -> str:
        """Acknowledge a custom-order request.

        The caller has already checked that every field is filled in.
        Returns the reference the request was logged under.
        """
        reference = f"co-{uuid4().hex[:12]}"
        logger.info(
            "custom_order_received",
            reference=reference,
            name=form.name,
            email=form.email,
            message_length=len(form.message),
        )

        self._notifier.notify(ACKNOWLEDGEMENT_MESSAGE)
        self._form = CustomOrderForm.empty()
        self._selection.set_custom_order_open(False)
        return reference

    def cancel(self) -> None:
        self._form = CustomOrderForm.empty()
        self._selection.set_custom_order_open(False)
