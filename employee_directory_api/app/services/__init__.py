"""
Service layer.

``validation`` holds the pure field rules for employee records and
``employee_service`` the database-backed record store.  API handlers
call into both; neither depends on FastAPI.
"""
