from dropdown_relacional.settings import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

DYNAMIC_DROPDOWN_LIMIT = 20
DYNAMIC_DROPDOWN_MIN_INPUT_LENGTH = 1
DYNAMIC_DROPDOWN_DELAY = 300
