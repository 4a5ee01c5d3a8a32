from postfeed.models.post_image_model import PostImage


def group_image_names_by_post(post_ids) -> dict[int, list[str]]:
    if not post_ids:
        return {}

    images = (
        PostImage.query
        .filter(PostImage.related_post_id.in_(post_ids))
        .order_by(PostImage.id.asc())
        .all()
    )

    grouped = {}
    for image in images:
        grouped.setdefault(image.related_post_id, []).append(image.name)
    return grouped
