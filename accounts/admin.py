from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from accounts.models import CustomUser, Unit, UserUnit, Team, TeamMember, TeamUnit


@admin.register(Unit)
class UnitAdmin(admin.ModelAdmin):
    list_display = ['name', 'type', 'status', 'manager', 'phone']
    list_filter = ['type', 'status']
    search_fields = ['name', 'address']
    fieldsets = (
        ('Basic Info', {
            'fields': ('name', 'type', 'status', 'manager', 'phone')
        }),
        ('Location', {
            'fields': ('address', 'full_address', 'latitude', 'longitude')
        }),
        ('Contract', {
            'fields': ('contract_number', 'contract_manager', 'meal_offers')
        }),
    )


@admin.register(CustomUser)
class CustomUserAdmin(UserAdmin):
    ordering = ['email']
    list_display = ['email', 'name', 'role', 'status', 'is_staff']
    list_filter = ['role', 'status', 'is_staff']
    search_fields = ['email', 'name']
    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Profile', {'fields': ('name', 'role', 'status')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'name', 'role', 'password1', 'password2'),
        }),
    )


class TeamMemberInline(admin.TabularInline):
    model = TeamMember
    extra = 0


class TeamUnitInline(admin.TabularInline):
    model = TeamUnit
    extra = 0


@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ['name', 'description']
    inlines = [TeamMemberInline, TeamUnitInline]


@admin.register(UserUnit)
class UserUnitAdmin(admin.ModelAdmin):
    list_display = ['user', 'unit', 'created_at']
