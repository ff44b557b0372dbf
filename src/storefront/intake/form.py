"""Custom-order form values.

``CustomOrderForm`` holds whatever the visitor has typed so far and may be
partially empty. ``CustomOrderRequest`` is the input-boundary check run
before a form reaches the intake: every field is required.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String, Text

from storefront.domain import storefront

FORM_FIELDS = ("name", "email", "message")


@storefront.value_object
class CustomOrderForm:
    name: String(max_length=255, default="", sanitize=False)
    email: String(max_length=254, default="", sanitize=False)
    message: Text(default="", sanitize=False)

    @classmethod
    def empty(cls):
        return cls(name="", email="", message="")

    @property
    def is_empty(self):
        return not (self.name or self.email or self.message)


@storefront.value_object
class CustomOrderRequest:
    """A custom-order form with every field filled in."""

    name: String(required=True, max_length=255, sanitize=False)
    email: String(required=True, max_length=254, sanitize=False)
    message: Text(required=True, sanitize=False)

    @invariant.post
    def email_must_have_one_at_sign(self):
        email = self.email or ""
        local_part, _, domain_part = email.partition("@")
        if email.count("@") != 1 or not local_part or not domain_part:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def from_form(cls, form):
        return cls(**form.to_dict())
