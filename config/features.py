"""
Feature Flags - Easy on/off toggle for console sections.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === SECTIONS ===
    DOCUMENTS_ENABLED: bool = os.getenv("DOCUMENTS_ENABLED", "true").lower() == "true"
    IMPORT_ENABLED: bool = os.getenv("IMPORT_ENABLED", "true").lower() == "true"
    LOGISTICS_ENABLED: bool = os.getenv("LOGISTICS_ENABLED", "true").lower() == "true"

    # === BADGES ===
    BADGE_QR_ENABLED: bool = os.getenv("BADGE_QR_ENABLED", "true").lower() == "true"

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"
    SHOW_ERROR_DETAILS: bool = os.getenv("SHOW_ERROR_DETAILS", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "documents_enabled": cls.DOCUMENTS_ENABLED,
            "import_enabled": cls.IMPORT_ENABLED,
            "logistics_enabled": cls.LOGISTICS_ENABLED,
            "badge_qr_enabled": cls.BADGE_QR_ENABLED,
            "debug_mode": cls.DEBUG_MODE,
            "show_error_details": cls.SHOW_ERROR_DETAILS,
        }


# Shortcut
features = Features()
