from marshmallow import ValidationError

from postfeed.results import ErrorKind, Result
from postfeed.schemas.post_schema import PostToAddSchema
from postfeed.schemas.user_schema import UserSchema


def describe_errors(errors, prefix="") -> str:
    parts = []
    for field, messages in sorted(errors.items(), key=lambda item: str(item[0])):
        name = f"{prefix}{field}"
        if isinstance(messages, dict):
            parts.append(describe_errors(messages, f"{name}."))
        elif isinstance(messages, (list, tuple)):
            parts.append(f"{name}: {' '.join(str(m) for m in messages)}")
        else:
            parts.append(f"{name}: {messages}")
    return "; ".join(parts)


def _load(schema, raw):
    try:
        return Result.ok(schema.load(raw))
    except ValidationError as e:
        errors = e.messages if isinstance(e.messages, dict) else {"_schema": e.messages}
        return Result.failed(describe_errors(errors), ErrorKind.VALIDATION)


def create_and_validate_user(user_model) -> Result:
    return _load(UserSchema(), user_model)


def create_and_validate_post(post_model) -> Result:
    return _load(PostToAddSchema(), post_model)
