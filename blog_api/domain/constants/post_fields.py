class PostFields:
    """MongoDB field names for posts collection"""

    MONGO_ID = "_id"

    TITLE = "title"
    CONTENT = "content"

    AUTHOR_ID = "author_id"
    AUTHOR_NAME = "author_name"

    LIKED_BY = "liked_by"

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
