"""
Registrar: an in-memory academic records manager.

Tracks students, teachers and courses, records enrollments and grades, and
renders grade, enrollment and teaching-load reports.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "In-memory academic records manager"
