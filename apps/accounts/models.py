from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
import uuid


class Role(models.TextChoices):
    MODERATOR = 'moderator', 'Moderator'
    EMPLOYEE = 'employee', 'Employee'


def normalize_roles(roles):
    """Return the role set as a sorted list of known role values.

    Raises ValueError on an empty set or an unknown role.
    """
    values = {str(role) for role in roles or ()}
    if not values:
        raise ValueError('At least one role is required')
    unknown = values - set(Role.values)
    if unknown:
        raise ValueError(f"Unknown role(s): {', '.join(sorted(unknown))}")
    # Moderator sorts first, so it is the primary role of a dual-role account
    return [role for role in Role.values if role in values]


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def create_user(self, email, password=None, roles=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        user = self.model(email=email, roles=normalize_roles(roles), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user


class User(AbstractBaseUser):
    """Service account authenticated by email; carries a set of roles."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255, db_index=True)

    # Subset of Role values; a list keeps room for future roles without schema churn
    roles = models.JSONField(default=list)

    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['created_at'], name='users_created_at_idx'),
        ]

    def __str__(self):
        return self.email

    @property
    def primary_role(self):
        """Role written into issued tokens."""
        return self.roles[0] if self.roles else None

    def has_role(self, role):
        return str(role) in self.roles
