from django.contrib.auth import get_user_model
from factory import CREATE_STRATEGY, LazyAttribute, Sequence
from factory.django import DjangoModelFactory

from og.groups.models import OgRole
from og.utils.tests.fake import faker


class UserFactory(DjangoModelFactory):
    class Meta:
        model = get_user_model()
        strategy = CREATE_STRATEGY

    is_active = True
    is_staff = False
    username = Sequence(lambda n: '{}{}'.format(faker.user_name(), n))
    email = Sequence(lambda n: str(n) + faker.email())

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        manager = cls._get_manager(model_class)
        return manager.create_user(*args, **kwargs)


class OgRoleFactory(DjangoModelFactory):
    class Meta:
        model = OgRole

    group_entity_type = 'host.node'
    name = Sequence(lambda n: 'role{}'.format(n))
    permissions = LazyAttribute(lambda _: [])
