import json
import logging
import random
from django.conf import settings
from django.http import JsonResponse, HttpRequest
from django.views.decorators.http import require_http_methods
from django.views.decorators.csrf import csrf_exempt
from .calls import generate_room_code
from .cards import card_to_grid, classify_card, classify_near_win, generate_card, winning_cells
from .timing import TimingError, plan_room

logger = logging.getLogger(__name__)


def _int_param(request: HttpRequest, name: str, default: int) -> int:
    raw = request.GET.get(name)
    if raw is None or raw == '':
        return default
    return int(raw)


def _json_body(request: HttpRequest) -> dict:
    if not request.body:
        return {}
    data = json.loads(request.body)
    if not isinstance(data, dict):
        raise ValueError("body must be a JSON object")
    return data


@require_http_methods(["GET"])
def api_timing(request: HttpRequest):
    try:
        players = _int_param(request, 'players', settings.MYNGO_DEFAULT_PLAYERS)
        minutes = _int_param(request, 'minutes', settings.MYNGO_DEFAULT_MEETING_MINUTES)
    except ValueError:
        return JsonResponse({"error": "players and minutes must be integers"}, status=400)
    try:
        plan = plan_room(players, minutes)
    except TimingError as e:
        logger.info("rejected timing request players=%s minutes=%s: %s", players, minutes, e)
        return JsonResponse({"error": str(e)}, status=400)
    logger.debug("call plan for %s players over %s minutes: %s", players, minutes, plan)
    return JsonResponse(plan.as_dict())


@csrf_exempt
@require_http_methods(["POST"])
def api_card(request: HttpRequest):
    try:
        data = _json_body(request)
    except ValueError:
        return JsonResponse({"error": "invalid json"}, status=400)
    seed = data.get('seed')
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return JsonResponse({"error": "seed must be an integer"}, status=400)
    card = generate_card(random.Random(seed) if seed is not None else None)
    logger.info("generated card seed=%s", seed)
    return JsonResponse({"card": card, "grid": card_to_grid(card)})


@csrf_exempt
@require_http_methods(["POST"])
def api_check(request: HttpRequest):
    try:
        data = _json_body(request)
    except ValueError:
        return JsonResponse({"error": "invalid json"}, status=400)
    card = data.get('card')
    marked = data.get('marked') or []
    if not isinstance(marked, list):
        return JsonResponse({"error": "marked must be a list"}, status=400)
    result = classify_card(card, marked)
    near = classify_near_win(card, marked)
    payload = result.as_dict()
    payload['nearWin'] = near
    if result.has_win:
        payload['cells'] = [list(rc) for rc in winning_cells(result)]
        logger.info("win detected pattern=%s line=%s marked=%d", result.pattern, result.line, len(marked))
    return JsonResponse(payload)


@require_http_methods(["GET"])
def api_room_code(request: HttpRequest):
    return JsonResponse({"code": generate_room_code()})
