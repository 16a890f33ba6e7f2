import logging

from django.conf import settings

logging.disable(logging.CRITICAL)


def pytest_configure(config):
    if not settings.configured:
        settings.configure(
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'django.contrib.auth',
            ],
            SECRET_KEY='yopay-tests',
            DEBUG=False,
            USE_TZ=True,
            YOPAY_USERNAME='dummyuser',
            YOPAY_PASSWORD='dummypassword',
            YOPAY_URL='https://41.220.12.206/services/yopaymentsdev/task.php',
        )
