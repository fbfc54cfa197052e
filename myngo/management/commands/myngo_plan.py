import logging
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from myngo.timing import TimingError, plan_room

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Show the recommended call cadence for a webinar"

    def add_arguments(self, parser):
        parser.add_argument('--players', type=int, default=settings.MYNGO_DEFAULT_PLAYERS)
        parser.add_argument('--minutes', type=int, default=settings.MYNGO_DEFAULT_MEETING_MINUTES)

    def handle(self, *args, **options):
        players = options['players']
        minutes = options['minutes']
        try:
            plan = plan_room(players, minutes)
        except TimingError as e:
            raise CommandError(str(e))
        logger.debug("plan computed: %s", plan)
        self.stdout.write(f"{players} players, {minutes}-minute meeting")
        self.stdout.write(f"  numbers needed for a winner: {plan.calls_needed}")
        self.stdout.write(f"  seconds between calls: {plan.seconds_between_calls}")
        self.stdout.write(f"  estimated game length: {plan.estimated_seconds // 60}m {plan.estimated_seconds % 60}s")
        self.stdout.write(self.style.SUCCESS(f"Call a number every {plan.call_interval} seconds"))
