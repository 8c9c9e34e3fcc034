"""User-facing messages shared by several screens."""

CANNOT_CONNECT = "Cannot connect to server. Make sure the backend is running."
INVALID_CREDENTIALS = "Invalid username or password. Please try again."
COUNT_FAILED = "Could not fetch student count."
LOAD_STUDENTS_FAILED = "Failed to load students. Make sure the backend is running."
SEARCH_FAILED = "Search failed. Please try again."
UPDATE_FAILED = "Failed to update student. Please try again."
DELETE_STUDENT_FAILED = "Failed to delete student. Please try again."
DUPLICATE_EMAIL = "Failed to add student. Email might already be in use."
LOAD_USERS_FAILED = "Failed to load users."
CREATE_USER_FAILED = "Failed to create user."
DELETE_USER_FAILED = "Failed to delete user."
CANNOT_DELETE_SELF = "You cannot delete your own account."
