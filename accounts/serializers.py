from django.db import transaction
from rest_framework import serializers
from .models import CustomUser, Unit, UserUnit, Team, TeamMember, TeamUnit


class UnitSerializer(serializers.ModelSerializer):
    class Meta:
        model = Unit
        fields = '__all__'
        read_only_fields = ('created_at', 'updated_at')

    def validate_name(self, value):
        if not value or not value.strip():
            raise serializers.ValidationError("Unit name is required.")
        return value.strip()


class TeamSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Team
        fields = ['id', 'name']


class CustomUserSerializer(serializers.ModelSerializer):
    teams = TeamSummarySerializer(many=True, read_only=True)

    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'name', 'role', 'status', 'teams', 'created_at', 'updated_at']
        read_only_fields = ['id', 'teams', 'created_at', 'updated_at']


class UserCreateSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=8)

    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'name', 'role', 'status', 'password']
        read_only_fields = ['id']

    def create(self, validated_data):
        return CustomUser.objects.create_user(**validated_data)


class RoleUpdateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=CustomUser.ROLE_CHOICES)


class TeamMembershipSerializer(serializers.Serializer):
    team_id = serializers.PrimaryKeyRelatedField(queryset=Team.objects.all(), source='team')


class UserUnitSerializer(serializers.ModelSerializer):
    unit_name = serializers.CharField(source='unit.name', read_only=True)

    class Meta:
        model = UserUnit
        fields = ['id', 'user', 'unit', 'unit_name', 'created_at']
        read_only_fields = ['id', 'created_at']


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class MemberSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomUser
        fields = ['id', 'name', 'email']


class UnitSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Unit
        fields = ['id', 'name']


class TeamSerializer(serializers.ModelSerializer):
    """Team with its members and units. Writes replace both sets wholesale."""
    members = MemberSummarySerializer(many=True, read_only=True)
    units = UnitSummarySerializer(many=True, read_only=True)
    unit_ids = serializers.PrimaryKeyRelatedField(
        queryset=Unit.objects.all(), many=True, write_only=True, required=False,
    )
    member_ids = serializers.PrimaryKeyRelatedField(
        queryset=CustomUser.objects.all(), many=True, write_only=True, required=False,
    )

    class Meta:
        model = Team
        fields = ['id', 'name', 'description', 'members', 'units', 'unit_ids', 'member_ids', 'created_at', 'updated_at']
        read_only_fields = ['id', 'created_at', 'updated_at']

    @transaction.atomic
    def create(self, validated_data):
        units = validated_data.pop('unit_ids', [])
        members = validated_data.pop('member_ids', [])
        team = Team.objects.create(**validated_data)
        self._replace_links(team, units, members)
        return team

    @transaction.atomic
    def update(self, instance, validated_data):
        units = validated_data.pop('unit_ids', None)
        members = validated_data.pop('member_ids', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        self._replace_links(instance, units, members)
        return instance

    def _replace_links(self, team, units, members):
        if units is not None:
            TeamUnit.objects.filter(team=team).delete()
            TeamUnit.objects.bulk_create(TeamUnit(team=team, unit=unit) for unit in set(units))
        if members is not None:
            TeamMember.objects.filter(team=team).delete()
            TeamMember.objects.bulk_create(TeamMember(team=team, user=user) for user in set(members))
