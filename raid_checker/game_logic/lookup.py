# raid_checker/game_logic/lookup.py
from urllib.parse import quote, urlencode

import requests

from raid_checker import config
from raid_checker.errors import InvalidInputError, UpstreamUnavailableError
from raid_checker.game_logic.cache import MISS, FreshnessCache


def build_hiscore_url(player_name: str) -> str:
    return f"{config.HISCORE_URL}?{urlencode({'player': player_name})}"


def build_proxy_url(player_name: str) -> str:
    return config.HISCORE_PROXY_URL.format(url=quote(build_hiscore_url(player_name), safe=""))


# Name -> URL builder. HISCORE_FETCH_STRATEGIES picks which ones are tried, in order.
SOURCE_URL_BUILDERS = {
    "direct": build_hiscore_url,
    "proxy": build_proxy_url,
}


def validate_player_name(player_name) -> str:
    if not isinstance(player_name, str) or not player_name.strip():
        raise InvalidInputError("player", config.MSG_MISSING_PLAYER)
    player_name = player_name.strip()
    if len(player_name) > config.MAX_PLAYER_NAME_LENGTH:
        raise InvalidInputError("player", f"Player names are at most {config.MAX_PLAYER_NAME_LENGTH} characters.")
    return player_name


class HiscoreFetcher:
    """Fetches the raw index_lite text, trying each configured source in order."""

    def __init__(self, strategies=None, session=None, timeout=None):
        self.strategies = list(config.HISCORE_FETCH_STRATEGIES if strategies is None else strategies)
        unknown = [name for name in self.strategies if name not in SOURCE_URL_BUILDERS]
        if unknown:
            raise ValueError(f"Unknown hiscore fetch strategy '{unknown[0]}'.")
        self.session = requests.Session() if session is None else session
        self.timeout = config.HISCORE_REQUEST_TIMEOUT_SECONDS if timeout is None else timeout

    def fetch(self, player_name: str) -> str:
        attempts = []
        for strategy in self.strategies:
            url = SOURCE_URL_BUILDERS[strategy](player_name)
            try:
                response = self.session.get(url, timeout=self.timeout)
            except requests.RequestException as e:
                attempts.append(f"{strategy}: {e.__class__.__name__}")
                if config.DEBUG_MODE: print(f"DEBUG LOOKUP: '{strategy}' request for '{player_name}' failed: {e}")
                continue
            if not response.ok:
                attempts.append(f"{strategy}: HTTP {response.status_code}")
                if config.DEBUG_MODE: print(f"DEBUG LOOKUP: '{strategy}' returned HTTP {response.status_code} for '{player_name}'.")
                continue
            if config.DEBUG_MODE: print(f"DEBUG LOOKUP: Fetched hiscores for '{player_name}' via '{strategy}'.")
            return response.text
        raise UpstreamUnavailableError(player_name, attempts)


class HiscoreService:
    """Cached front for HiscoreFetcher. Failed fetches never touch the cache."""

    def __init__(self, fetcher=None, cache=None):
        self.fetcher = HiscoreFetcher() if fetcher is None else fetcher
        self.cache = FreshnessCache() if cache is None else cache

    def get_hiscore_data(self, player_name) -> str:
        player_name = validate_player_name(player_name)
        cached = self.cache.get(player_name)
        if cached is not MISS:
            return cached
        payload = self.fetcher.fetch(player_name)
        self.cache.put(player_name, payload)
        return payload
