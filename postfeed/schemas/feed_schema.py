from postfeed.extensions.extensions import ma


class PostModelSchema(ma.Schema):
    id = ma.Integer()
    author_name = ma.String(data_key="authorName")
    author_avatar = ma.String(data_key="authorAvatar", allow_none=True)
    likes_count = ma.Integer(data_key="likesCount")
    comments_count = ma.Integer(data_key="commentsCount")
    text = ma.String()
    date = ma.DateTime()
    images = ma.List(ma.String())


class PostWithDateModelSchema(ma.Schema):
    post_models = ma.List(ma.Nested(PostModelSchema), data_key="postModels")
    eldest_date = ma.DateTime(data_key="eldestDate", allow_none=True)
