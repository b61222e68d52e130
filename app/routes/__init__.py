#app/routes/__init__.py

from .employee import router as employee_router
from .department import router as department_router
from .project import router as project_router
from .client_config import router as client_config_router
