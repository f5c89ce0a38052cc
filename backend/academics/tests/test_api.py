from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIClient

from academics.models import Faculty, LectureAssignment, Module, Program

User = get_user_model()

BASE = '/api/academics/'


class AcademicsApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.leader = User.objects.create_user(username='leader', password='secret1', role=User.Role.PROGRAM_LEADER)
        cls.lecturer = User.objects.create_user(username='lect', password='secret1', role=User.Role.LECTURER)
        cls.lecturer2 = User.objects.create_user(username='lect2', password='secret1', role=User.Role.LECTURER)
        cls.faculty = Faculty.objects.create(code='FICT', name='ICT')
        cls.other_faculty = Faculty.objects.create(code='FBMG', name='Business')
        cls.program = Program.objects.create(program_code='BSCIT', program_name='BSc IT', faculty=cls.faculty)
        cls.module = Module.objects.create(module_name='Web', program=cls.program, total_registered_students=30)

    def setUp(self):
        self.client = APIClient()

    def test_program_leader_creates_program_and_module(self):
        self.client.force_authenticate(self.leader)
        resp = self.client.post(f'{BASE}programs/', {
            'program_code': 'BSCSM', 'program_name': 'BSc Software', 'faculty_id': self.faculty.id,
        }, format='json')
        self.assertEqual(resp.status_code, 201, resp.data)
        resp = self.client.post(f'{BASE}modules/', {
            'module_name': 'Databases', 'program_id': resp.data['id'], 'total_registered_students': 12,
        }, format='json')
        self.assertEqual(resp.status_code, 201, resp.data)
        self.assertEqual(resp.data['faculty_id'], self.faculty.id)
        self.assertEqual(resp.data['program_code'], 'BSCSM')

    def test_module_faculty_must_match_program(self):
        self.client.force_authenticate(self.leader)
        resp = self.client.post(f'{BASE}modules/', {
            'module_name': 'Marketing', 'program_id': self.program.id, 'faculty_id': self.other_faculty.id,
        }, format='json')
        self.assertEqual(resp.status_code, 400)

    def test_lecturer_cannot_write_but_can_read(self):
        self.client.force_authenticate(self.lecturer)
        resp = self.client.post(f'{BASE}faculties/', {'code': 'X', 'name': 'X'}, format='json')
        self.assertEqual(resp.status_code, 403)
        resp = self.client.get(f'{BASE}programs/', {'faculty': self.faculty.id})
        self.assertEqual([p['program_code'] for p in resp.data], ['BSCIT'])

    def test_programs_by_faculty(self):
        self.client.force_authenticate(self.lecturer)
        resp = self.client.get(f'{BASE}programs/by-faculty/{self.other_faculty.id}/')
        self.assertEqual(resp.data, [])

    def test_assignment_records_who_assigned(self):
        self.client.force_authenticate(self.leader)
        resp = self.client.post(f'{BASE}lecture-assignments/', {
            'lecturer_id': self.lecturer.id, 'module_id': self.module.id,
        }, format='json')
        self.assertEqual(resp.status_code, 201, resp.data)
        self.assertEqual(resp.data['program_id'], self.program.id)
        self.assertEqual(resp.data['assigned_by_name'], 'leader')

    def test_only_lecturers_can_be_assigned(self):
        self.client.force_authenticate(self.leader)
        resp = self.client.post(f'{BASE}lecture-assignments/', {
            'lecturer_id': self.leader.id, 'module_id': self.module.id,
        }, format='json')
        self.assertEqual(resp.status_code, 400)

    def test_lecturer_sees_only_own_assignments(self):
        mine = LectureAssignment.objects.create(lecturer=self.lecturer, module=self.module, program=self.program)
        other_module = Module.objects.create(module_name='Networks', program=self.program)
        LectureAssignment.objects.create(lecturer=self.lecturer2, module=other_module, program=self.program)
        self.client.force_authenticate(self.lecturer)
        resp = self.client.get(f'{BASE}lecture-assignments/', {'lecturer': self.lecturer2.id})
        self.assertEqual([a['id'] for a in resp.data], [mine.id])

    def test_lecturer_list(self):
        self.client.force_authenticate(self.leader)
        resp = self.client.get(f'{BASE}lecturers/')
        self.assertEqual([u['username'] for u in resp.data], ['lect', 'lect2'])


class StudentModulesTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        faculty = Faculty.objects.create(code='FICT', name='ICT')
        self.program = Program.objects.create(program_code='BSCIT', program_name='BSc IT', faculty=faculty)
        Module.objects.create(module_name='Web', program=self.program)

    def test_enrolled_student(self):
        student = User.objects.create_user(username='s1', password='secret1', program=self.program)
        self.client.force_authenticate(student)
        resp = self.client.get(f'{BASE}student/modules/')
        self.assertTrue(resp.data['hasProgram'])
        self.assertEqual([m['module_name'] for m in resp.data['modules']], ['Web'])

    def test_unenrolled_student(self):
        student = User.objects.create_user(username='s2', password='secret1')
        self.client.force_authenticate(student)
        resp = self.client.get(f'{BASE}student/modules/')
        self.assertEqual(resp.data['modules'], [])
        self.assertFalse(resp.data['hasProgram'])
        self.assertIn('not enrolled', resp.data['message'])
