"""Routes for newsletter signups."""
from flask import render_template, request, jsonify, current_app, abort
from . import signup_bp
from .controller import SubmissionController, SubmissionState
from .state import FieldStateStore
from services.notifications import FlashNotificationSink
from services.signups import DynamoSignupGateway, SignupsService


def get_gateway():
    """Get the configured persistence gateway, DynamoDB by default."""
    gateway = current_app.config.get('SIGNUP_GATEWAY')
    if gateway is None:
        gateway = DynamoSignupGateway(SignupsService(current_app.config['SIGNUPS_TABLE']))
    return gateway


def get_form_data():
    """Read submitted fields from a form-encoded or JSON body."""
    if not request.is_json:
        return request.form
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400)
    return data


def build_controller(data=None):
    """Create a controller for one request, seeded with the posted values."""
    store = FieldStateStore.from_mapping(data or {})
    # JSON clients render their own toasts from the response body
    notifier = FlashNotificationSink(flash_messages=not request.is_json)
    return SubmissionController(store, get_gateway(), notifier)


def render_form(controller, status=200):
    """Render the form as JSON, an htmx partial or the full page."""
    if request.is_json:
        state = controller.outcome or controller.state
        return jsonify({
            'status': state.value,
            'status_text': controller.status_text,
            'errors': controller.errors,
            'values': controller.values,
            'notifications': controller.notifier.messages
        }), status

    if request.headers.get('HX-Request') == 'true':
        return render_template('signup/partials/form.html', form=controller), status
    return render_template('signup/index.html', form=controller), status


@signup_bp.route('/')
def index():
    """Render an empty signup form."""
    return render_form(build_controller())


@signup_bp.route('/signup', methods=['POST'])
async def submit():
    """Handle a signup submission."""
    controller = build_controller(get_form_data())
    try:
        await controller.submit()
    finally:
        controller.close()

    if controller.errors:
        current_app.logger.info(f"Signup rejected: invalid {', '.join(controller.errors)}")
        return render_form(controller, 400)

    if controller.outcome is SubmissionState.FAILED:
        current_app.logger.error(f"Signup failed: {controller.failure_reason}")
        return render_form(controller, 500)

    current_app.logger.info('Signup stored')
    return render_form(controller)


@signup_bp.route('/signup/reset', methods=['POST'])
def reset():
    """Clear the form, its errors and its status text."""
    controller = build_controller(get_form_data())
    controller.reset()
    return render_form(controller)
