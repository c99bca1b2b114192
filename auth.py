"""
Request Identity

The upstream auth layer forwards the authenticated user's id in a request
header. This module turns it into a Flask-Login user so routes can use
login_required and current_user.
"""

from flask import current_app, jsonify
from flask_login import LoginManager, UserMixin

login_manager = LoginManager()


class ApiUser(UserMixin):
    """Opaque authenticated identity: only the id is known here."""

    def __init__(self, user_id):
        self.id = user_id


@login_manager.request_loader
def load_user_from_request(request):
    user_id = request.headers.get(current_app.config['USER_ID_HEADER'], '').strip()
    if not user_id:
        return None
    return ApiUser(user_id)


@login_manager.user_loader
def load_user(user_id):
    # No server-side sessions; identity is re-read from each request
    return None


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'error': 'You must be logged in to access this resource'}), 401
