from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models
from django.conf import settings
import uuid


class CustomUserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('The Email field must be set')
        email = self.normalize_email(email)
        extra_fields.setdefault('role', 'operator')

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', 'admin')

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password, **extra_fields)


class Unit(models.Model):
    """A production kitchen: a central hub or a satellite spoke."""
    TYPE_CHOICES = (
        ('hub', 'Hub'),
        ('spoke', 'Spoke'),
    )
    STATUS_CHOICES = (
        ('active', 'Active'),
        ('inactive', 'Inactive'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='active')
    address = models.CharField(max_length=255, blank=True, null=True)
    full_address = models.TextField(blank=True, null=True)
    phone = models.CharField(max_length=30, blank=True, null=True)
    manager = models.CharField(max_length=255, blank=True, null=True)
    contract_number = models.CharField(max_length=100, blank=True, null=True)
    contract_manager = models.CharField(max_length=255, blank=True, null=True)
    latitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    longitude = models.DecimalField(max_digits=9, decimal_places=6, null=True, blank=True)
    meal_offers = models.ManyToManyField('catalog.MealOffer', related_name='units', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'units'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.type})"


class CustomUser(AbstractUser):
    ROLE_CHOICES = settings.USER_ROLE_CHOICES
    STATUS_CHOICES = (
        ('active', 'Active'),
        ('inactive', 'Inactive'),
    )

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, blank=True, default='')
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='operator')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='active')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Remove username and use email instead
    username = None
    email = models.EmailField(unique=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = CustomUserManager()

    class Meta:
        db_table = 'users'
        ordering = ['email']

    def __str__(self):
        return f"{self.name} <{self.email}>" if self.name else self.email

    def is_admin_role(self):
        return self.role == 'admin'

    def is_inactive(self):
        return self.status == 'inactive'


class UserUnit(models.Model):
    """Direct grant of a unit to a user, independent of teams."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='unit_grants')
    unit = models.ForeignKey(Unit, on_delete=models.CASCADE, related_name='user_grants')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'user_units'
        unique_together = ['user', 'unit']

    def __str__(self):
        return f"{self.user.email} -> {self.unit.name}"


class Team(models.Model):
    """Group of users sharing access to a set of units."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, null=True)
    members = models.ManyToManyField(CustomUser, through='TeamMember', related_name='teams', blank=True)
    units = models.ManyToManyField(Unit, through='TeamUnit', related_name='teams', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'teams'
        ordering = ['name']

    def __str__(self):
        return self.name


class TeamMember(models.Model):
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='team_memberships')

    class Meta:
        db_table = 'team_members'
        unique_together = ['team', 'user']


class TeamUnit(models.Model):
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name='unit_links')
    unit = models.ForeignKey(Unit, on_delete=models.CASCADE, related_name='team_links')

    class Meta:
        db_table = 'team_units'
        unique_together = ['team', 'unit']
