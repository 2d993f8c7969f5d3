# implied for everyone who is not a member
NON_MEMBER = 'non-member'

# every group member has this
MEMBER = 'member'

# can manage the group and its members
ADMINISTRATOR = 'administrator'

# global capability, bypasses all membership based checks
ADMINISTER_GROUP = 'groups.administer_group'

MANAGE_MEMBERS = 'manage members'

DEFAULT_PERMISSIONS = {
    NON_MEMBER: [],
    MEMBER: [],
    ADMINISTRATOR: ['update group', 'delete group', MANAGE_MEMBERS],
}


def group_permission(operation):
    return '{} group'.format(operation)


def content_permission(operation, bundle, own=False):
    return '{} {} {} content'.format(operation, 'own' if own else 'any', bundle)


def create_content_permission(bundle):
    return 'create {} content'.format(bundle)
