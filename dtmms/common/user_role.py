from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    TRAINER = "trainer"
    MENTOR = "mentor"
    TRAINEE = "trainee"
