"""GitHub API client for pull request files, commit authors and comments."""

import os
import logging
from typing import Dict, List, Optional
import requests
from requests.adapters import HTTPAdapter

from .exceptions import GitHubAPIError
from .models import ChangedFile

DEFAULT_API_URL = 'https://api.github.com'


class GitHubAPIClient:
    """Handles GitHub REST requests and pagination. Requests are never retried."""

    def __init__(self, token: str = None, base_url: str = DEFAULT_API_URL):
        """Initialize the GitHub API client.

        Args:
            token: GitHub token for authentication
            base_url: REST API root (GITHUB_API_URL on GitHub Enterprise)
        """
        # Use provided token or fall back to environment variable
        self.token = token or os.environ.get('GITHUB_TOKEN')
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()

        # max_retries=0 disables retries
        adapter = HTTPAdapter(pool_connections=10, pool_maxsize=10, max_retries=0)
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)

        self.session.headers.update({'Accept': 'application/vnd.github.v3+json'})
        if self.token:
            self.session.headers.update({'Authorization': f'token {self.token}'})
            logging.info("Initialized GitHub API client with token")
        else:
            logging.warning("No GitHub token provided. Rate limits will be much lower.")

    def _check_response(self, response: requests.Response):
        """Raise for rate limiting and HTTP errors."""
        if response.status_code in (403, 429):
            try:
                message = response.json().get('message', '')
            except ValueError:
                message = response.text
            logging.error(f"GitHub API refused request ({response.status_code}): {message}")
            raise GitHubAPIError(f"GitHub API request refused ({response.status_code}): {message}")

        response.raise_for_status()

    def get_paginated(self, url: str, params: Dict = None) -> List[Dict]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Args:
            url: The API endpoint URL
            params: Query parameters

        Returns:
            List of all items from all pages
        """
        results = []
        page = 1
        per_page = 100

        params = dict(params or {})
        params['per_page'] = per_page

        while True:
            params['page'] = page
            logging.debug(f"Fetching page {page} from {url}")
            response = self.session.get(url, params=params)
            self._check_response(response)
            data = response.json()

            if not data:
                break

            results.extend(data)

            if len(data) < per_page:
                break

            page += 1

        logging.debug(f"Fetched {len(results)} total items from {url}")
        return results

    def get(self, url: str) -> requests.Response:
        """Make a single GET request to the GitHub API.

        Args:
            url: The API endpoint URL

        Returns:
            Response object
        """
        return self.session.get(url)

    def post(self, url: str, payload: Dict) -> Dict:
        """POST a JSON payload and return the decoded response."""
        response = self.session.post(url, json=payload)
        self._check_response(response)
        return response.json()

    def get_changed_files(self, repo: str, pr_number: int) -> List[ChangedFile]:
        """List files changed by a pull request, excluding deleted files.

        Args:
            repo: Repository name in format 'owner/repo'
            pr_number: Pull request number

        Returns:
            Changed files in the order GitHub reports them
        """
        url = f"{self.base_url}/repos/{repo}/pulls/{pr_number}/files"
        files = self.get_paginated(url)

        changed_files = []
        for file in files:
            if file.get('status') == 'removed':
                logging.debug(f"Skipping removed file: {file['filename']}")
                continue
            changed_files.append(ChangedFile(filename=file['filename'], status=file.get('status', 'modified')))

        return changed_files

    def resolve_commit_author(self, repo: str, sha: str) -> Optional[str]:
        """Map a commit to the login of its GitHub author.

        Returns:
            The author's login, or None when GitHub does not know the commit
            or cannot link its author email to an account
        """
        response = self.get(f"{self.base_url}/repos/{repo}/commits/{sha}")

        if response.status_code in (404, 422):
            logging.debug(f"Commit {sha} not found on GitHub")
            return None

        self._check_response(response)
        author = response.json().get('author') or {}
        login = author.get('login')
        if not login:
            logging.debug(f"Commit {sha} has no linked GitHub user")
        return login

    def create_review_comment(self, repo: str, pr_number: int, body: str) -> Dict:
        """Post a comment on the pull request conversation."""
        url = f"{self.base_url}/repos/{repo}/issues/{pr_number}/comments"
        comment = self.post(url, {'body': body})
        logging.info(f"Posted reviewer suggestion comment on {repo}#{pr_number}")
        return comment
