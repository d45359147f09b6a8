from adapters.web.handlers import auth, dashboard, registrations, imports, sport_entry, accreditation, logistics, documents
from config.features import Features

# Route tables registered in order; fixed paths before their {param} siblings
route_tables = [
    auth.routes,
    dashboard.routes,
    registrations.routes,
]

if Features.IMPORT_ENABLED:
    route_tables.append(imports.routes)

route_tables.append(sport_entry.routes)
route_tables.append(accreditation.routes)

if Features.LOGISTICS_ENABLED:
    route_tables.append(logistics.routes)

if Features.DOCUMENTS_ENABLED:
    route_tables.append(documents.routes)

__all__ = ["route_tables"]
