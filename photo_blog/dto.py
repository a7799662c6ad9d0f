"""
Outgoing representations of posts.
"""


def blog_dto(post):
    """Summary shape used for create and list responses."""
    return {
        "id": post.pk,
        "title": post.title,
        "author": post.author_id,
        "content": post.content,
        "photo_url": post.photo_path,
        "created_at": post.created_at.isoformat() if post.created_at else None,
    }


def author_dto(author):
    if author is None:
        return None
    return {
        "id": author.pk,
        "name": author.name,
        "username": author.username,
    }


def blog_details_dto(post):
    """Detail shape with the author record expanded."""
    return {
        "id": post.pk,
        "title": post.title,
        "content": post.content,
        "photo_url": post.photo_path,
        "created_at": post.created_at.isoformat() if post.created_at else None,
        "author": author_dto(post.get_author()),
    }
