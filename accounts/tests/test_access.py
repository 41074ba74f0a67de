from django.test import TestCase, RequestFactory
from rest_framework.test import APITestCase
from rest_framework import status

from accounts.models import CustomUser, Unit, UserUnit, Team, TeamMember, TeamUnit
from accounts.permissions import resolve_claims, get_claims


class PermissionClaimsTest(TestCase):
    def setUp(self):
        self.hub = Unit.objects.create(name='Hub', type='hub')
        self.north = Unit.objects.create(name='North', type='spoke')
        self.south = Unit.objects.create(name='South', type='spoke')
        self.chef = CustomUser.objects.create_user(email='chef@test.com', password='ChefPass123!', role='chef')

    def test_direct_grants_and_team_units_are_combined(self):
        UserUnit.objects.create(user=self.chef, unit=self.north)
        team = Team.objects.create(name='Hub crew')
        TeamMember.objects.create(team=team, user=self.chef)
        TeamUnit.objects.create(team=team, unit=self.hub)

        claims = resolve_claims(self.chef)
        self.assertEqual(claims.unit_ids, frozenset({str(self.north.id), str(self.hub.id)}))
        self.assertTrue(claims.can_access_unit(self.hub.id))
        self.assertFalse(claims.can_access_unit(self.south.id))

    def test_unit_reached_twice_is_listed_once(self):
        UserUnit.objects.create(user=self.chef, unit=self.north)
        team = Team.objects.create(name='North crew')
        TeamMember.objects.create(team=team, user=self.chef)
        TeamUnit.objects.create(team=team, unit=self.north)
        self.assertEqual(resolve_claims(self.chef).unit_ids, frozenset({str(self.north.id)}))

    def test_admin_passes_every_role_and_unit_check(self):
        admin = CustomUser.objects.create_user(email='admin@test.com', password='AdminPass123!', role='admin')
        claims = resolve_claims(admin)
        self.assertTrue(claims.has_any_role(['operator']))
        self.assertTrue(claims.can_access_unit(self.south.id))

    def test_role_check(self):
        claims = resolve_claims(self.chef)
        self.assertTrue(claims.has_any_role(['chef', 'manager']))
        self.assertFalse(claims.has_any_role(['manager', 'operator']))

    def test_claims_are_resolved_once_per_request(self):
        request = RequestFactory().get('/api/units')
        request.user = self.chef
        first = get_claims(request)
        UserUnit.objects.create(user=self.chef, unit=self.north)
        self.assertIs(get_claims(request), first)


class UnitEndpointsTest(APITestCase):
    def setUp(self):
        self.hub = Unit.objects.create(name='Hub', type='hub')
        self.north = Unit.objects.create(name='North', type='spoke')
        self.admin = CustomUser.objects.create_user(email='admin@test.com', password='AdminPass123!', role='admin')
        self.operator = CustomUser.objects.create_user(email='op@test.com', password='OpPass123!', role='operator')
        UserUnit.objects.create(user=self.operator, unit=self.north)

    def test_admin_sees_all_units(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.get('/api/units')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)

    def test_operator_sees_only_allowed_units(self):
        self.client.force_authenticate(user=self.operator)
        response = self.client.get('/api/units')
        self.assertEqual([u['name'] for u in response.data], ['North'])

    def test_operator_cannot_request_foreign_unit(self):
        self.client.force_authenticate(user=self.operator)
        response = self.client.get(f'/api/units?unit_id={self.hub.id}')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], 'Forbidden: Access to this unit is denied')

    def test_only_admin_creates_units(self):
        self.client.force_authenticate(user=self.operator)
        response = self.client.post('/api/units', {'name': 'East', 'type': 'spoke'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data['error'], 'Forbidden: Insufficient permissions')

        self.client.force_authenticate(user=self.admin)
        response = self.client.post('/api/units', {'name': 'East', 'type': 'spoke'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['status'], 'active')

    def test_invalid_unit_type_rejected(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.post('/api/units', {'name': 'East', 'type': 'warehouse'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('type', response.data['details'])


class UserAdministrationTest(APITestCase):
    def setUp(self):
        self.unit = Unit.objects.create(name='North', type='spoke')
        self.admin = CustomUser.objects.create_user(email='admin@test.com', password='AdminPass123!', role='admin')
        self.chef = CustomUser.objects.create_user(email='chef@test.com', password='ChefPass123!', role='chef')
        self.team = Team.objects.create(name='Kitchen')

    def test_non_admin_cannot_list_users(self):
        self.client.force_authenticate(user=self.chef)
        response = self.client.get('/api/users')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_lists_users_with_teams(self):
        TeamMember.objects.create(team=self.team, user=self.chef)
        self.client.force_authenticate(user=self.admin)
        response = self.client.get('/api/users')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        chef = next(u for u in response.data if u['email'] == 'chef@test.com')
        self.assertEqual(chef['teams'], [{'id': str(self.team.id), 'name': 'Kitchen'}])

    def test_admin_creates_user(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.post('/api/users', {
            'email': 'nutri@test.com', 'name': 'Nutri', 'role': 'nutritionist', 'password': 'NutriPass123!',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertNotIn('password', response.data)
        self.assertTrue(CustomUser.objects.get(email='nutri@test.com').check_password('NutriPass123!'))

    def test_role_update(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.put(f'/api/users/{self.chef.id}/role', {'role': 'manager'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.chef.refresh_from_db()
        self.assertEqual(self.chef.role, 'manager')

    def test_role_update_rejects_unknown_role(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.put(f'/api/users/{self.chef.id}/role', {'role': 'owner'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_role_update_unknown_user(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.put('/api/users/00000000-0000-0000-0000-000000000000/role', {'role': 'chef'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_add_and_remove_team_membership(self):
        self.client.force_authenticate(user=self.admin)
        url = f'/api/users/{self.chef.id}/teams'
        response = self.client.post(url, {'team_id': str(self.team.id)}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(TeamMember.objects.filter(team=self.team, user=self.chef).exists())

        response = self.client.delete(url, {'team_id': str(self.team.id)}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(TeamMember.objects.filter(team=self.team, user=self.chef).exists())

    def test_grant_and_revoke_unit(self):
        self.client.force_authenticate(user=self.admin)
        payload = {'user_id': str(self.chef.id), 'unit_id': str(self.unit.id)}

        response = self.client.post('/api/admin/user-units', payload, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        response = self.client.post('/api/admin/user-units', payload, format='json')
        self.assertEqual(response.data['message'], 'Access already granted')
        self.assertEqual(UserUnit.objects.filter(user=self.chef).count(), 1)

        listing = self.client.get(f'/api/admin/users/{self.chef.id}/units')
        self.assertEqual(listing.data[0]['unit'], self.unit.id)

        response = self.client.delete('/api/admin/user-units', payload, format='json')
        self.assertEqual(response.data['message'], 'Access revoked')
        self.assertFalse(UserUnit.objects.filter(user=self.chef).exists())

    def test_grant_requires_both_ids(self):
        self.client.force_authenticate(user=self.admin)
        response = self.client.post('/api/admin/user-units', {'user_id': str(self.chef.id)}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Missing user_id or unit_id')


class TeamEndpointsTest(APITestCase):
    def setUp(self):
        self.admin = CustomUser.objects.create_user(email='admin@test.com', password='AdminPass123!', role='admin')
        self.chef = CustomUser.objects.create_user(email='chef@test.com', password='ChefPass123!', role='chef')
        self.operator = CustomUser.objects.create_user(email='op@test.com', password='OpPass123!', role='operator')
        self.hub = Unit.objects.create(name='Hub', type='hub')
        self.north = Unit.objects.create(name='North', type='spoke')
        self.client.force_authenticate(user=self.admin)

    def test_create_team_with_members_and_units(self):
        response = self.client.post('/api/teams', {
            'name': 'Hub crew',
            'member_ids': [str(self.chef.id)],
            'unit_ids': [str(self.hub.id)],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        team = Team.objects.get(name='Hub crew')
        self.assertEqual(list(team.members.all()), [self.chef])
        self.assertEqual(list(team.units.all()), [self.hub])
        self.assertIn(str(self.hub.id), resolve_claims(self.chef).unit_ids)

    def test_update_replaces_members_and_units(self):
        team = Team.objects.create(name='Crew')
        TeamMember.objects.create(team=team, user=self.chef)
        TeamUnit.objects.create(team=team, unit=self.hub)

        response = self.client.put(f'/api/teams/{team.id}', {
            'name': 'Crew',
            'member_ids': [str(self.operator.id)],
            'unit_ids': [str(self.north.id)],
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(list(team.members.all()), [self.operator])
        self.assertEqual(list(team.units.all()), [self.north])
        self.assertEqual(resolve_claims(self.chef).unit_ids, frozenset())

    def test_delete_team(self):
        team = Team.objects.create(name='Crew')
        TeamMember.objects.create(team=team, user=self.chef)
        response = self.client.delete(f'/api/teams/{team.id}')
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(TeamMember.objects.exists())

    def test_non_admin_cannot_manage_teams(self):
        self.client.force_authenticate(user=self.chef)
        response = self.client.get('/api/teams')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
