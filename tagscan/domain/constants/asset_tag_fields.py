class AssetTagFields:
    """MongoDB field names for the asset_tags collection"""

    MONGO_ID = "_id"

    ASSET_TAG = "assetTag"
    ASSET_URL = "assetUrl"
    SCANNED_AT = "scannedAt"
    SOURCE_IMAGE_NAME = "sourceImageName"

    OWNER_USER_ID = "userId"
    OWNER_EMAIL = "userEmail"
    ROOM_NUMBER = "roomNumber"
