from django.db import models


class GroupAudienceField(models.ManyToManyField):
    """
    References the group(s) an entity belongs to.

    ``bundles`` limits the field to some bundles of the model it is declared on,
    ``target_bundles`` limits which group bundles can be referenced.
    A field with ``blank=False`` is required.
    """

    def __init__(self, to, bundles=None, target_bundles=None, **kwargs):
        self.bundles = tuple(bundles) if bundles else None
        self.target_bundles = tuple(target_bundles) if target_bundles else None
        kwargs.setdefault('related_name', '+')
        kwargs.setdefault('symmetrical', False)
        super().__init__(to, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        if self.bundles:
            kwargs['bundles'] = self.bundles
        if self.target_bundles:
            kwargs['target_bundles'] = self.target_bundles
        return name, path, args, kwargs

    def applies_to(self, bundle):
        return self.bundles is None or bundle in self.bundles
