# import all models so Base.metadata knows every table
from project_tracker.db.models.project import Project
from project_tracker.db.models.category import Category
from project_tracker.db.models.material import Material
from project_tracker.db.models.step import Step
from project_tracker.db.models.project_category import ProjectCategory
