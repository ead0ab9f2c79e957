from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _check_email(value: str) -> str:
    # Format check only: the address is stored and matched exactly as typed
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


Email = Annotated[str, AfterValidator(_check_email)]


class RequestModel(BaseModel):
    """Accepts the frontend's camelCase keys as well as snake_case"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
