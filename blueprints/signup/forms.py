"""Forms for newsletter signup."""
from email_validator import EmailNotValidError, validate_email
from wtforms import Form, StringField, EmailField, TelField, TextAreaField, validators
from wtforms.validators import ValidationError

from .state import MESSAGE_MAX_LENGTH, SignupInput


class EmailAddress:
    """Email grammar check without DNS lookups.

    Unlike ``validators.Email`` this accepts the reserved ``test`` domain,
    e.g. ``user@example.test``.
    """

    def __init__(self, message=None):
        self.message = message or 'Invalid email address.'

    def __call__(self, form, field):
        try:
            validate_email(field.data or '', check_deliverability=False, test_environment=True)
        except EmailNotValidError as e:
            raise ValidationError(self.message) from e


class SignupForm(Form):
    """Form for newsletter signup.

    Minimum and maximum lengths are separate validators so each bound
    reports its own message.
    """
    name = StringField('Name', [
        validators.Length(min=2, message='Name must be at least 2 characters.'),
        validators.Length(max=50, message='Name must be at most 50 characters.')
    ])
    email = EmailField('Email', [
        EmailAddress(message='Please enter a valid email address.')
    ])
    phone = TelField('Phone', [
        validators.Length(min=7, message='Phone Number must be at least 7 characters.'),
        validators.Length(max=10, message='Phone Number must be at most 10 characters.')
    ])
    message = TextAreaField('Message', [
        validators.Length(
            max=MESSAGE_MAX_LENGTH,
            message=f'Message must be at most {MESSAGE_MAX_LENGTH} characters.'
        )
    ])


def validate_signup(signup: SignupInput) -> dict:
    """Validate all four fields, returning at most one error per field."""
    form = SignupForm(data=signup.as_dict())
    form.validate()
    return {name: errors[0] for name, errors in form.errors.items() if errors}
