"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents"""
    ID = "id"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PASSWORD = "password"
    PICTURE_PATH = "picturePath"
    FRIENDS = "friends"
    LOCATION = "location"
    OCCUPATION = "occupation"
    VIEWED_PROFILE = "viewedProfile"
    IMPRESSIONS = "impressions"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
