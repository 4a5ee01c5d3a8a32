from marshmallow import EXCLUDE, post_load, validate

from postfeed.extensions.extensions import ma
from postfeed.models.post_image_model import PostImage
from postfeed.models.post_model import Post
from postfeed.schemas.validators import not_blank

MAX_POST_IMAGES = 8
MAX_POST_TEXT_LENGTH = 5000


class PostToAddSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    login = ma.String(required=True, validate=not_blank)
    text = ma.String(
        required=True,
        validate=[not_blank, validate.Length(max=MAX_POST_TEXT_LENGTH)]
    )
    images = ma.List(
        ma.String(validate=[not_blank, validate.Length(max=255)]),
        load_default=list,
        validate=validate.Length(
            max=MAX_POST_IMAGES,
            error=f"Maximum {MAX_POST_IMAGES} images allowed."
        )
    )

    @post_load
    def make_post(self, data, **kwargs):
        return Post(
            text=data["text"].strip(),
            images=[PostImage(name=name.strip()) for name in data["images"]]
        )
