"""English strings for the management console."""

EN_STRINGS = {
    # === SHELL ===
    "app_name": "CUCC GMS",
    "nav_dashboard": "Dashboard",
    "nav_registrations": "Registrations",
    "nav_logistics": "Logistics",
    "nav_sport_entry": "Sport Entry",
    "nav_accreditation": "Accreditation",
    "nav_documents": "Documents",
    "logout": "Sign out",

    # === LOGIN ===
    "login_email": "Email",
    "login_send_code": "Send code",
    "login_code": "Code",
    "login_submit": "Sign in",
    "login_back": "Change email",
    "login_code_sent": "A one-time code has been sent to your inbox.",

    # === REGISTRATIONS ===
    "reg_title": "Registrations",
    "reg_search": "Search name or organization",
    "reg_all_status": "All statuses",
    "reg_all_roles": "All roles",
    "reg_export": "Export Excel",
    "reg_new": "New registration",
    "reg_import": "Batch import",
    "reg_empty": "No registrations match the filters",
    "reg_audit": "Review",
    "reg_decision": "Decision",
    "reg_reject": "Reject",
    "reg_accept": "Accept",
    "reg_remarks": "Rejection reason",
    "reg_submit": "Submit",
    "reg_draft": "Save draft",
    "audit_accepted": "Registration accepted",
    "audit_rejected": "Registration rejected",
    "audit_updated": "Status of {name} updated.",
    "intake_sent": "Registration submitted",
    "intake_sent_desc": "Locked and waiting for review.",
    "intake_draft": "Draft saved",
    "intake_draft_desc": "You can continue editing later.",
    "export_done": "Export ready",
    "export_done_desc": "The Excel report is downloading.",
    "export_failed": "Export failed",

    # === SPORT ENTRY ===
    "entry_title": "Sport Entry",
    "entry_long_list": "Athlete long list",
    "entry_save": "Save shortlist",
    "entry_saved": "Shortlist saved",
    "entry_saved_desc": "The entry list of \"{event}\" was updated.",
    "entry_no_events": "No sport events yet",

    # === ACCREDITATION ===
    "acc_title": "Accreditation",
    "acc_download": "Download badges PDF",
    "acc_count": "Count",
    "acc_empty": "Nobody accepted in this category yet",

    # === LOGISTICS ===
    "log_title": "Logistics",
    "log_empty": "No travel plans yet",
    "log_luggage": "Bulky luggage (bikes/boxes)",
    "log_vans": "⚠️ Heavy luggage volume, book at least {count} cargo vans.",
    "log_vans_ok": "Luggage volume fits regular shuttle buses.",

    # === DOCUMENTS ===
    "doc_title": "Documents",
    "doc_upload": "Upload",
    "doc_all": "All files",
    "doc_empty": "No documents available to you",
    "doc_published": "Document published",
    "doc_published_desc": "\"{title}\" was uploaded and is now visible.",
    "doc_roles_hint": "Access is role based: only authorised roles see restricted categories and private statements.",

    # === IMPORT ===
    "imp_title": "Batch import",
    "imp_start": "Start import",

    # === ERRORS ===
    "error_title": "Something went wrong",
    "error_body": "The console hit an unexpected error, possibly a network glitch or a temporary outage.",
    "error_reload": "Reload",
    "error_home": "Back to dashboard",
    "not_found": "Page not found",
}
