# Role levels: a lower number carries more privilege.
ROLE_ADMIN = 0
ROLE_EDITOR = 10
ROLE_CONTRIBUTOR = 100
ROLE_SUBSCRIBER = 10000

ROLE_NAMES = {
    "admin": ROLE_ADMIN,
    "editor": ROLE_EDITOR,
    "contributor": ROLE_CONTRIBUTOR,
    "subscriber": ROLE_SUBSCRIBER,
}

# parent_id stored for pages at the top of a wiki
ROOT_PARENT_ID = ""

# Accepted on the wire in place of the empty root parent id
ROOT_ALIAS = "ROOT"

MAX_TAGS = 20
MAX_TAG_LENGTH = 50
