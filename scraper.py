import sys
import json
import logging
import argparse
import requests
from bs4 import BeautifulSoup
from typing import List, Optional

from config_manager import ConfigManager, get_config
from errors import (
    EztvError,
    EmptyResponseError,
    FetchError,
    InvalidArgumentError,
    MissingArgumentError,
    ShowNotFoundError,
    UnimplementedError,
)
from listing import correlate_document
from models import EpisodeDetail, ShowDetail, ShowSummary

logger = logging.getLogger(__name__)

SHOW_LINK_SELECTOR = 'a.thread_link'
SHOW_TITLE_SELECTOR = "b > span[itemprop='name']"
SHOW_COVER_SELECTOR = '.show_info_main_logo > img:nth-child(1)'


class EztvScraper:
    """Read-only queries against the eztv show directory and show pages."""

    def __init__(self, config: Optional[ConfigManager] = None):
        """Initialize the scraper."""
        self.config = config or get_config()
        self.base_url = self.config.get('scraper.base_url', 'https://eztv.ag').rstrip('/')
        self.showlist_path = self.config.get('scraper.showlist_path', '/showlist/')
        self.timeout = self.config.get('scraper.timeout', 10.0)
        self.parser = self.config.get('scraper.parser', 'html.parser')

        # Browser-ähnliche Headers, pro Request mitgeschickt
        self.headers = {
            'User-Agent': self.config.get('scraper.user_agent'),
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
            'Connection': 'keep-alive',
        }

    def make_request(self, url: str) -> requests.Response:
        """
        GET a page once.

        Raises:
            FetchError: on connection problems, timeouts and HTTP status >= 400
        """
        logger.info(f"Fetching {url}")
        try:
            # Keine geteilte Session: jede Abfrage ohne Cookie-Zustand
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Request for {url} failed: {str(e)}")
            raise FetchError(str(e), url=url) from e
        return response

    def fetch_document(self, url: str) -> BeautifulSoup:
        response = self.make_request(url)
        return BeautifulSoup(response.text, self.parser)

    def search_show(self, keyword: str) -> List[ShowSummary]:
        """
        Find all shows in the directory whose title contains keyword.

        The match is a literal, case-sensitive substring test.

        Args:
            keyword (str): Text to look for in show titles

        Returns:
            List[ShowSummary]: Matching shows in directory order

        Raises:
            InvalidArgumentError: keyword is empty
            FetchError: the directory could not be retrieved
            EmptyResponseError: no directory entry matched
            ShowNotFoundError: the result list came out empty
        """
        if not keyword:
            raise InvalidArgumentError("keyword must not be empty")

        soup = self.fetch_document(self.base_url + self.showlist_path)

        matches = [link for link in soup.select(SHOW_LINK_SELECTOR) if keyword in link.get_text()]
        if not matches:
            raise EmptyResponseError(f"no show matches '{keyword}'")

        shows = [ShowSummary(title=link.get_text(), url=link.get('href', '')) for link in matches]
        if not shows:
            raise ShowNotFoundError(f"no show matches '{keyword}'")

        logger.info(f"Found {len(shows)} shows for '{keyword}'")
        return shows

    def get_show_details(self, path: str) -> ShowDetail:
        """
        Resolve a show page into its title, cover and episode index.

        Args:
            path (str): Site-relative show path, e.g. "/shows/449/the-show/"

        Returns:
            ShowDetail: Title and cover default to "" when the page has none

        Raises:
            MissingArgumentError: path is empty
            FetchError: the page could not be retrieved
        """
        if not path:
            raise MissingArgumentError("show path must not be empty")

        soup = self.fetch_document(self.base_url + path)
        episodes = correlate_document(soup)

        title_node = soup.select_one(SHOW_TITLE_SELECTOR)
        title = title_node.get_text() if title_node else ''

        cover_node = soup.select_one(SHOW_COVER_SELECTOR)
        cover = cover_node.get('src', '') if cover_node else ''

        if not title:
            logger.warning(f"No show title found on {path}")

        logger.info(f"Resolved {path}: {len(episodes.identifiers())} episodes, {len(episodes)} variants")
        return ShowDetail(title=title, url=path, cover=cover, episodes=episodes)

    def get_episode_details(self, path: str) -> EpisodeDetail:
        """Episode pages are not parsed yet; always raises UnimplementedError."""
        raise UnimplementedError("episode details are not supported yet")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Query the eztv show directory")
    subparsers = parser.add_subparsers(dest='command', required=True)

    search_parser = subparsers.add_parser('search', help="Search shows by title")
    search_parser.add_argument('keyword')

    show_parser = subparsers.add_parser('show', help="List episodes and magnets of a show")
    show_parser.add_argument('path', help="Show path, e.g. /shows/449/the-show/")

    args = parser.parse_args(argv)
    scraper = EztvScraper()

    try:
        if args.command == 'search':
            result = [show.to_dict() for show in scraper.search_show(args.keyword)]
        else:
            result = scraper.get_show_details(args.path).to_dict()
    except EztvError as e:
        print(f"{e.kind}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(main())
