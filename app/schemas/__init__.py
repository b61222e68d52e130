from .employee import EmployeeCreate, EmployeeUpdate, EmployeeOut
from .department import (
    DepartmentParentCreate, DepartmentParentUpdate, DepartmentParentOut,
    DepartmentChildCreate, DepartmentChildUpdate, DepartmentChildOut,
)
from .project import (
    ProjectCreate, ProjectUpdate, ProjectOut,
    ProjectEmployeeCreate, ProjectEmployeeUpdate, ProjectEmployeeOut,
)
