"""
Domain constants - roles, statuses, categories and other static data.
Centralized here for easy modification and future localization.
"""

# Registration roles ("function" column)
ROLE_ATHLETE = "运动员"
ROLE_COACH = "教练员"
ROLE_TEAM_OFFICIAL = "随队官员"
ROLE_TEAM_DOCTOR = "队医"
ROLE_TECH_OFFICIAL = "技术官员"
ROLE_ITO = "ITO"
ROLE_MEDIA = "Media"

REGISTRATION_ROLES = {
    ROLE_ATHLETE: {"label_zh": "运动员", "label_en": "Athlete"},
    ROLE_COACH: {"label_zh": "教练员", "label_en": "Coach"},
    ROLE_TEAM_OFFICIAL: {"label_zh": "随队官员", "label_en": "Official"},
    ROLE_TEAM_DOCTOR: {"label_zh": "队医", "label_en": "Medical"},
}

# Roles that only arrive through batch import
STAFF_ROLES = {
    ROLE_TECH_OFFICIAL: {"label_zh": "技术官员", "label_en": "Technical official"},
    ROLE_ITO: {"label_zh": "ITO", "label_en": "ITO"},
    ROLE_MEDIA: {"label_zh": "媒体", "label_en": "Media"},
}

# Every role the registry filter offers
FILTER_ROLES = {**REGISTRATION_ROLES, **STAFF_ROLES}

GENDERS = {
    "male": {"label_zh": "男", "label_en": "Male"},
    "female": {"label_zh": "女", "label_en": "Female"},
}

# Filter value meaning "no predicate"
FILTER_ALL = "all"

# Dashboard monitoring groups
DASHBOARD_GROUPS = [ROLE_ATHLETE, ROLE_TEAM_OFFICIAL, ROLE_TECH_OFFICIAL]
DASHBOARD_GROUP_COLORS = ["blue", "indigo", "emerald"]
RECENT_ACTIVITY_LIMIT = 5

# === Accreditation ===
BADGE_ZONE_ALL = "ALL"
DEFAULT_BADGE_COLOR = "#2563eb"

# === Documents ===
VISIBILITY_PUBLIC = "All"
VIEWER_ROLE_ADMIN = "Admin"

DOCUMENT_ROLES = {
    "All": {"label_zh": "所有人公开", "label_en": "Public"},
    "Leader": {"label_zh": "参赛单位 (领队)", "label_en": "Team leaders"},
    "TO": {"label_zh": "技术官员", "label_en": "Technical officials"},
    "Media": {"label_zh": "媒体单位", "label_en": "Media"},
    "Admin": {"label_zh": "赛事管理员", "label_en": "Administrators"},
}

DOCUMENT_CATEGORIES = {
    "Regulations": {"label_zh": "竞赛规程", "label_en": "Regulations"},
    "Manuals": {"label_zh": "技术手册", "label_en": "Manuals"},
    "Forms": {"label_zh": "资格声明", "label_en": "Forms"},
    "Notices": {"label_zh": "官方通知", "label_en": "Notices"},
}

DEFAULT_DOCUMENT_CATEGORY = "Regulations"
DEFAULT_DOCUMENT_ROLES = ["Leader", "Admin"]

# === Logistics ===
TRANSPORT_AIR = "飞机"
TRANSPORT_RAIL = "火车/高铁"
TRANSPORT_CHARTER = "组委会包车"
TRANSPORT_SELF = "自行抵达"
TRANSPORT_OTHER = "其他"

# Checked in order, first hit wins
TRANSPORT_RULES = [
    (TRANSPORT_AIR, ("机",)),
    (TRANSPORT_RAIL, ("火", "高铁")),
    (TRANSPORT_CHARTER, ("包",)),
    (TRANSPORT_SELF, ("自",)),
]

LUGGAGE_KEYWORDS = ("车", "箱", "bike", "box")
LUGGAGE_UNITS_PER_VAN = 50

# === Batch import ===
IMPORT_ARCHIVE_SUFFIX = ".zip"
IMPORT_STATUS_SUCCESS = "Success"
IMPORT_STATUS_ERROR = "Error"

# === Intake limits ===
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 50
MAX_REMARKS_LENGTH = 500

# === Notifications ===
NOTIFICATION_TYPE_SYSTEM = "system"
NOTIFICATION_STATUS_SENT = "sent"


def get_role_display(role: str, lang: str = "zh") -> str:
    """Get display text for a registration role"""
    meta = FILTER_ROLES.get(role)
    if not meta:
        return role
    return meta.get(f"label_{lang}", meta.get("label_en", role))


def get_document_category_display(category: str, lang: str = "zh") -> str:
    """Get display text for a document category"""
    meta = DOCUMENT_CATEGORIES.get(category)
    if not meta:
        return category
    return meta.get(f"label_{lang}", meta.get("label_en", category))


def get_document_role_display(role: str, lang: str = "zh") -> str:
    meta = DOCUMENT_ROLES.get(role)
    if not meta:
        return role
    return meta.get(f"label_{lang}", meta.get("label_en", role))
