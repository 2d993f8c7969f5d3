from faker import Faker as BaseFaker

# fixed, so factory generated titles and names are the same on every run
SEED = 123


class Faker(object):
    def __init__(self, seed=SEED):
        self._faker = BaseFaker()
        self._faker.seed_instance(seed)

    def __getattr__(self, item):
        return getattr(self._faker, item)


faker = Faker()
