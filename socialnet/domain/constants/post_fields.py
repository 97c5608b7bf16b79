"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post documents"""
    ID = "id"
    USER_ID = "userId"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    LOCATION = "location"
    DESCRIPTION = "description"
    PICTURE_PATH = "picturePath"
    USER_PICTURE_PATH = "userPicturePath"
    LIKES = "likes"
    COMMENTS = "comments"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"
