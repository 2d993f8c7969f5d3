class OgError(Exception):
    pass


class AlreadyExists(OgError):
    def __init__(self, membership):
        super().__init__('User {} is already a member of {}:{}'.format(
            membership.user_id,
            membership.group_entity_type,
            membership.group_id,
        ))
        self.membership = membership
