"""
TutorBook – contact manager for private tutors (command parsing + in-memory book).
"""
