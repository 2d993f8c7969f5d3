from setuptools import find_packages, setup

setup(
    name="og",
    version="0.1",
    description="Organic groups: group membership, group content access and orphan cleanup for Django sites",
    license="AGPL",
    packages=find_packages(
        include=["config", "og", "og.*"],
    ),
    package_data={
        "config": ["options.env"],
    },
    include_package_data=True,
    exclude_package_data={"config": ["local_settings"]},
    install_requires=[
        "Django>=4.2",
        "djangorestframework",
        "huey",
        "redis",
        "django-redis",
        "python-dotenv",
        "sentry-sdk",
        "influxdb",
        "click",
        "psycopg[binary]",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-django",
            "factory_boy",
            "Faker",
        ],
    },
    entry_points={
        "console_scripts": [
            "og = og.cli:run",
        ],
    },
    zip_safe=False,
)
