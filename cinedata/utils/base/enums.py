from enum import Enum


class Durability(Enum):
    MAJORITY = "majority"
    DEFAULT = "default"


class Operation(Enum):
    GET_COMMENT = "get_comment"
    ADD_COMMENT = "add_comment"
    UPDATE_COMMENT = "update_comment"
    DELETE_COMMENT = "delete_comment"
    TOP_COMMENTERS = "top_commenters"
    ADD_USER = "add_user"
    GET_USER = "get_user"
    DELETE_USER = "delete_user"
    UPDATE_PREFERENCES = "update_preferences"
    CREATE_SESSION = "create_session"
    GET_SESSION = "get_session"
    DELETE_SESSIONS = "delete_sessions"
