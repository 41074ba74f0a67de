import logging

from django.contrib.auth import authenticate
from django.shortcuts import get_object_or_404
from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from core.mixins import ProtectedDestroyMixin
from core.permissions import IsAdmin, WriteRolesMixin
from core.scoping import UnitScopeMixin, parse_uuid
from .models import CustomUser, Unit, UserUnit, Team, TeamMember
from .permissions import get_claims
from .serializers import (
    CustomUserSerializer, UserCreateSerializer, RoleUpdateSerializer, TeamMembershipSerializer,
    UnitSerializer, UserUnitSerializer, TeamSerializer, LoginSerializer,
)

logger = logging.getLogger(__name__)


class LoginView(APIView):
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        email = request.data.get('email')
        password = request.data.get('password')

        if not email or not password:
            return Response(
                {'error': 'Email and password are required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(request, email=email, password=password)
        if user is None:
            logger.info(f"Failed login for {email}")
            return Response(
                {'error': 'Invalid credentials'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        if user.is_inactive():
            logger.info(f"Login refused for inactive user {email}")
            return Response(
                {'error': 'User is inactive'},
                status=status.HTTP_403_FORBIDDEN
            )

        refresh = RefreshToken.for_user(user)
        refresh['role'] = user.role
        logger.info(f"User {email} logged in")
        return Response({
            'token': str(refresh.access_token),
            'refresh': str(refresh),
            'user': CustomUserSerializer(user).data,
        })


class MeView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        claims = get_claims(request)
        data = CustomUserSerializer(request.user).data
        data['unit_ids'] = None if claims.is_admin else sorted(claims.unit_ids)
        return Response(data)


# ---------------------------
# Units
# ---------------------------

class UnitListCreateAPIView(WriteRolesMixin, UnitScopeMixin, generics.ListCreateAPIView):
    queryset = Unit.objects.prefetch_related('meal_offers')
    serializer_class = UnitSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [IsAdmin]
    unit_field = 'id'
    filterset_fields = ['type', 'status']


class UnitRetrieveUpdateDestroyAPIView(WriteRolesMixin, UnitScopeMixin, ProtectedDestroyMixin, generics.RetrieveUpdateDestroyAPIView):
    queryset = Unit.objects.prefetch_related('meal_offers')
    serializer_class = UnitSerializer
    permission_classes = [permissions.IsAuthenticated]
    write_permission_classes = [IsAdmin]
    unit_field = 'id'
    protected_message = 'Unit has stock, orders or plans and cannot be deleted'


# ---------------------------
# Users (admin only)
# ---------------------------

class UserListCreateAPIView(generics.ListCreateAPIView):
    queryset = CustomUser.objects.prefetch_related('teams')
    permission_classes = [permissions.IsAuthenticated, IsAdmin]
    filterset_fields = ['role', 'status']

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return UserCreateSerializer
        return CustomUserSerializer


class UserRoleUpdateView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsAdmin]

    def put(self, request, pk):
        user = get_object_or_404(CustomUser, pk=pk)
        serializer = RoleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user.role = serializer.validated_data['role']
        user.save(update_fields=['role', 'updated_at'])
        logger.info(f"Role of {user.email} set to {user.role} by {request.user.email}")
        return Response(CustomUserSerializer(user).data)


class UserTeamsView(APIView):
    """Add (POST) or remove (DELETE) a user from a team."""
    permission_classes = [permissions.IsAuthenticated, IsAdmin]

    def post(self, request, pk):
        user = get_object_or_404(CustomUser, pk=pk)
        serializer = TeamMembershipSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        TeamMember.objects.get_or_create(team=serializer.validated_data['team'], user=user)
        return Response({'message': 'Added to team'})

    def delete(self, request, pk):
        user = get_object_or_404(CustomUser, pk=pk)
        serializer = TeamMembershipSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        TeamMember.objects.filter(team=serializer.validated_data['team'], user=user).delete()
        return Response({'message': 'Removed from team'})


# ---------------------------
# Direct unit grants (admin only)
# ---------------------------

class UserUnitsListView(generics.ListAPIView):
    serializer_class = UserUnitSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdmin]
    pagination_class = None

    def get_queryset(self):
        return UserUnit.objects.filter(user_id=self.kwargs['pk']).select_related('unit')


class UserUnitGrantView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsAdmin]

    def _resolve(self, request):
        user_id = request.data.get('user_id')
        unit_id = request.data.get('unit_id')
        if not user_id or not unit_id:
            return None, None
        user = get_object_or_404(CustomUser, pk=parse_uuid(user_id, 'user_id'))
        unit = get_object_or_404(Unit, pk=parse_uuid(unit_id))
        return user, unit

    def post(self, request):
        user, unit = self._resolve(request)
        if user is None:
            return Response({'error': 'Missing user_id or unit_id'}, status=status.HTTP_400_BAD_REQUEST)

        _, created = UserUnit.objects.get_or_create(user=user, unit=unit)
        if not created:
            return Response({'message': 'Access already granted'})
        logger.info(f"Unit {unit.name} granted to {user.email}")
        return Response({'message': 'Access granted'}, status=status.HTTP_201_CREATED)

    def delete(self, request):
        user, unit = self._resolve(request)
        if user is None:
            return Response({'error': 'Missing user_id or unit_id'}, status=status.HTTP_400_BAD_REQUEST)

        UserUnit.objects.filter(user=user, unit=unit).delete()
        logger.info(f"Unit {unit.name} revoked from {user.email}")
        return Response({'message': 'Access revoked'})


# ---------------------------
# Teams (admin only)
# ---------------------------

class TeamListCreateAPIView(generics.ListCreateAPIView):
    queryset = Team.objects.prefetch_related('members', 'units')
    serializer_class = TeamSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdmin]


class TeamRetrieveUpdateDestroyAPIView(generics.RetrieveUpdateDestroyAPIView):
    queryset = Team.objects.prefetch_related('members', 'units')
    serializer_class = TeamSerializer
    permission_classes = [permissions.IsAuthenticated, IsAdmin]
