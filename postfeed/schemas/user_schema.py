from marshmallow import EXCLUDE, post_load, validate

from postfeed.extensions.extensions import ma
from postfeed.models.user_model import User
from postfeed.schemas.validators import not_blank


class UserSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    login = ma.String(
        required=True,
        validate=[not_blank, validate.Length(max=80)]
    )
    password = ma.String(required=True, validate=not_blank)
    secret_question = ma.String(
        required=True,
        data_key="secretQuestion",
        validate=not_blank
    )
    avatar = ma.String(
        load_default=None,
        allow_none=True,
        validate=validate.Length(max=255)
    )

    @post_load
    def make_user(self, data, **kwargs):
        # password is still raw here; the auth service salts and hashes it
        return User(
            login=data["login"].strip(),
            password=data["password"],
            avatar=data.get("avatar")
        )
