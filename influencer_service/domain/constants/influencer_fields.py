"""Constants for Influencer model field names"""


class InfluencerFields:
    """Field name constants for Influencer model"""
    ID = "id"
    NAME = "name"
    BIO = "bio"
    AVATAR = "avatar"
    NATIONALITY = "nationality"
    GENDER = "gender"
    SOCIALS = "socials"
    LABEL = "label"
    VISITS = "visits"
    UPDATED_ON = "updated_on"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    # Fields included in the lightweight summary projection
    SUMMARY = (NAME, AVATAR, LABEL)


class Gender:
    """Recognized gender values"""
    MALE = "m"
    FEMALE = "f"

    ALL = (MALE, FEMALE)
