import pytest
from pydantic import ValidationError

from auth_service.api.routes.auth import RegisterRequest
from auth_service.api.routes.profile import ChangePasswordRequest
from auth_service.api.utils.request_model import RequestModel


@pytest.mark.parametrize(
    "body",
    [
        {"oldPassword": "pw1", "newPassword": "pw2"},
        {"old_password": "pw1", "new_password": "pw2"},
    ],
)
def test_change_password_request_accepts_both_casings(body):
    request = ChangePasswordRequest.model_validate(body)

    assert isinstance(request, RequestModel)
    assert request.old_password == "pw1"
    assert request.new_password == "pw2"


def test_email_is_kept_exactly_as_typed():
    request = RegisterRequest.model_validate(
        {"email": "Alice@Example.COM", "password": "pw1"}
    )

    assert request.email == "Alice@Example.COM"


@pytest.mark.parametrize("email", ["not-an-email", "a@", "@x.com", "a b@x.com"])
def test_malformed_email_is_rejected(email):
    with pytest.raises(ValidationError):
        RegisterRequest.model_validate({"email": email, "password": "pw1"})
