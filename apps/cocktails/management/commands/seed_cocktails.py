"""
Management command to load the built-in cocktail catalogue.

Usage:
    python manage.py seed_cocktails [--clear]

Creates system cocktails (no creator, public, origin 'system').
Existing catalogue entries with the same name are left untouched.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.cocktails.models import Cocktail, CocktailOrigin, Difficulty


CATALOGUE = [
    {
        'name': 'Margarita',
        'cocktail_type': 'Sour',
        'difficulty': Difficulty.EASY,
        'ingredients': [
            {'name': 'Tequila', 'amount': '50', 'unit': 'ml'},
            {'name': 'Lime juice', 'amount': '25', 'unit': 'ml'},
            {'name': 'Triple sec', 'amount': '20', 'unit': 'ml'},
            {'name': 'Salt', 'amount': None, 'unit': ''},
        ],
        'instructions': [
            'Rim a glass with salt.',
            'Shake tequila, lime juice and triple sec with ice.',
            'Strain into the glass.',
        ],
    },
    {
        'name': 'Mojito',
        'cocktail_type': 'Highball',
        'difficulty': Difficulty.MEDIUM,
        'ingredients': [
            {'name': 'White rum', 'amount': '50', 'unit': 'ml'},
            {'name': 'Lime juice', 'amount': '25', 'unit': 'ml'},
            {'name': 'Sugar syrup', 'amount': '15', 'unit': 'ml'},
            {'name': 'Mint', 'amount': '8', 'unit': 'leaves'},
            {'name': 'Soda water', 'amount': None, 'unit': ''},
        ],
        'instructions': [
            'Muddle mint with sugar syrup and lime juice.',
            'Add rum and crushed ice.',
            'Top with soda water and stir.',
        ],
    },
    {
        'name': 'Negroni',
        'cocktail_type': 'Stirred',
        'difficulty': Difficulty.EASY,
        'ingredients': [
            {'name': 'Gin', 'amount': '30', 'unit': 'ml'},
            {'name': 'Campari', 'amount': '30', 'unit': 'ml'},
            {'name': 'Sweet vermouth', 'amount': '30', 'unit': 'ml'},
        ],
        'instructions': [
            'Stir all ingredients with ice.',
            'Strain over a large ice cube and garnish with orange peel.',
        ],
    },
    {
        'name': 'Old Fashioned',
        'cocktail_type': 'Stirred',
        'difficulty': Difficulty.MEDIUM,
        'ingredients': [
            {'name': 'Bourbon', 'amount': '60', 'unit': 'ml'},
            {'name': 'Sugar syrup', 'amount': '5', 'unit': 'ml'},
            {'name': 'Angostura bitters', 'amount': '2', 'unit': 'dashes'},
        ],
        'instructions': [
            'Stir bourbon, syrup and bitters with ice.',
            'Strain over fresh ice and express an orange peel.',
        ],
    },
    {
        'name': 'Daiquiri',
        'cocktail_type': 'Sour',
        'difficulty': Difficulty.EASY,
        'ingredients': [
            {'name': 'White rum', 'amount': '60', 'unit': 'ml'},
            {'name': 'Lime juice', 'amount': '25', 'unit': 'ml'},
            {'name': 'Sugar syrup', 'amount': '15', 'unit': 'ml'},
        ],
        'instructions': [
            'Shake all ingredients hard with ice.',
            'Double strain into a chilled coupe.',
        ],
    },
    {
        'name': 'Espresso Martini',
        'cocktail_type': 'Shaken',
        'difficulty': Difficulty.HARD,
        'ingredients': [
            {'name': 'Vodka', 'amount': '50', 'unit': 'ml'},
            {'name': 'Coffee liqueur', 'amount': '20', 'unit': 'ml'},
            {'name': 'Espresso', 'amount': '30', 'unit': 'ml'},
            {'name': 'Sugar syrup', 'amount': '10', 'unit': 'ml'},
        ],
        'instructions': [
            'Pull a fresh espresso and let it cool slightly.',
            'Shake everything very hard with ice.',
            'Strain into a chilled glass and garnish with three coffee beans.',
        ],
    },
]


class Command(BaseCommand):
    help = 'Load the built-in cocktail catalogue'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete existing system cocktails before loading',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing system cocktails...')
            deleted, _ = Cocktail.objects.filter(creator__isnull=True).delete()
            self.stdout.write(f'  Deleted {deleted} rows')

        self.stdout.write('Loading cocktail catalogue...')

        created = 0
        for data in CATALOGUE:
            _, was_created = Cocktail.objects.get_or_create(
                name=data['name'],
                creator=None,
                defaults={
                    'cocktail_type': data['cocktail_type'],
                    'difficulty': data['difficulty'],
                    'ingredients': data['ingredients'],
                    'instructions': [
                        {'step': index, 'description': text}
                        for index, text in enumerate(data['instructions'], start=1)
                    ],
                    'is_public': True,
                    'origin_type': CocktailOrigin.SYSTEM,
                },
            )
            if was_created:
                created += 1

        self.stdout.write(self.style.SUCCESS(
            f'Catalogue loaded: {created} created, {len(CATALOGUE) - created} already present'
        ))
