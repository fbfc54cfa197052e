import os
import random
import sys
import pytest

# Ensure the project root (containing `config` and `myngo`) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

import django

django.setup()

from django.test import Client

from myngo.cards import generate_card


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def card(rng):
    return generate_card(rng)


@pytest.fixture()
def fixed_card():
    return {
        'M': [1, 4, 7, 10, 13],
        'Y': [16, 19, 22, 25, 28],
        'N': [31, 34, 40, 43],
        'G': [46, 49, 52, 55, 58],
        'O': [61, 64, 67, 70, 73],
    }


@pytest.fixture()
def client():
    return Client()
