"""Chinese strings for the management console (default language)."""

ZH_STRINGS = {
    # === SHELL ===
    "app_name": "CUCC GMS",
    "nav_dashboard": "仪表盘",
    "nav_registrations": "报名注册",
    "nav_logistics": "差旅后勤",
    "nav_sport_entry": "竞赛信息",
    "nav_accreditation": "证件管理",
    "nav_documents": "文档中心",
    "logout": "退出登录",

    # === LOGIN ===
    "login_email": "邮箱",
    "login_send_code": "发送验证码",
    "login_code": "验证码",
    "login_submit": "立即登录",
    "login_back": "返回修改邮箱",
    "login_code_sent": "验证码已发送至您的邮箱，请查收。",

    # === REGISTRATIONS ===
    "reg_title": "报名注册",
    "reg_search": "搜索姓名或单位",
    "reg_all_status": "所有状态",
    "reg_all_roles": "所有职能",
    "reg_export": "导出 Excel",
    "reg_new": "新增报名",
    "reg_import": "批量导入",
    "reg_empty": "暂无符合条件的报名记录",
    "reg_audit": "审核详情",
    "reg_decision": "审核决策",
    "reg_reject": "驳回修正",
    "reg_accept": "审核通过",
    "reg_remarks": "驳回原因",
    "reg_submit": "提交报名",
    "reg_draft": "保存草稿",
    "audit_accepted": "审核已通过",
    "audit_rejected": "驳回已生效",
    "audit_updated": "{name} 的状态已更新。",
    "intake_sent": "报名已提交",
    "intake_sent_desc": "信息已锁定，等待审核人员处理。",
    "intake_draft": "草稿已保存",
    "intake_draft_desc": "您可以稍后继续编辑。",
    "export_done": "导出成功",
    "export_done_desc": "Excel 报表已生成并开始下载。",
    "export_failed": "导出失败",

    # === SPORT ENTRY ===
    "entry_title": "竞赛信息",
    "entry_long_list": "运动员长名单",
    "entry_save": "保存名单",
    "entry_saved": "名单保存成功",
    "entry_saved_desc": "已成功更新“{event}”的正式参赛名单。",
    "entry_no_events": "暂无竞赛项目",

    # === ACCREDITATION ===
    "acc_title": "证件管理",
    "acc_download": "下载证件 PDF",
    "acc_count": "数量",
    "acc_empty": "该类别暂无已接受人员",

    # === LOGISTICS ===
    "log_title": "差旅后勤",
    "log_empty": "暂无差旅计划数据",
    "log_luggage": "大件行李 (车/箱)",
    "log_vans": "⚠️ 大宗行李较多，建议安排至少 {count} 辆大型载货车辆。",
    "log_vans_ok": "行李总量在常规承载范围内，普通接驳巴士即可覆盖。",

    # === DOCUMENTS ===
    "doc_title": "文档中心",
    "doc_upload": "上传文件",
    "doc_all": "全部文件",
    "doc_empty": "暂无可访问的文件",
    "doc_published": "文件已发布",
    "doc_published_desc": "“{title}”已成功上传并可见。",
    "doc_roles_hint": "文档访问受严格的角色控制。只有授权角色（如领队、管理员）才能访问特定敏感类目或私有声明文件。",

    # === IMPORT ===
    "imp_title": "批量导入报名",
    "imp_start": "开始执行导入",

    # === ERRORS ===
    "error_title": "系统遇到了问题",
    "error_body": "非常抱歉，应用程序在运行过程中遇到了未预期的错误。这可能是由网络波动或系统临时故障引起的。",
    "error_reload": "尝试修复并重载",
    "error_home": "回到主页",
    "not_found": "页面不存在",
}
