"""Tests for the GitHub client."""

import json
import typing

import httpx

from package_version_check import clients, errors, models
from tests import base

Handler = typing.Callable[[httpx.Request], httpx.Response]


def _tags(*names: str) -> list[dict[str, typing.Any]]:
    return [
        {
            'name': name,
            'commit': {
                'sha': f'{index:040x}',
                'url': f'https://api.github.com/commits/{index:040x}',
            },
            'zipball_url': f'https://api.github.com/zipball/{name}',
            'tarball_url': f'https://api.github.com/tarball/{name}',
        }
        for index, name in enumerate(names)
    ]


class GitHubConfigurationTestCase(base.TestCase):
    def test_api_url_for_github_com(self) -> None:
        config = models.GitHubConfiguration()
        self.assertEqual(config.api_url, 'https://api.github.com')

    def test_api_url_for_enterprise(self) -> None:
        config = models.GitHubConfiguration(hostname='github.example.com')
        self.assertEqual(config.api_url, 'https://github.example.com/api/v3')


class GitHubTestCase(base.AsyncTestCase):
    """Test cases for the GitHub client."""

    def setUp(self) -> None:
        super().setUp()
        self.requests: list[httpx.Request] = []
        self.config = models.GitHubConfiguration(token='test-token')

    def _client(self, handler: Handler) -> clients.GitHub:
        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        client = clients.GitHub(
            self.config, transport=httpx.MockTransport(record)
        )
        self.addAsyncCleanup(client.aclose)
        return client

    async def test_get_package_version(self) -> None:
        client = self._client(
            lambda request: httpx.Response(
                200, text=json.dumps({'name': 'widget', 'version': '1.2.3'})
            )
        )
        version = await client.get_package_version(
            'octo-org', 'widget', 'main'
        )
        self.assertEqual(version, '1.2.3')

        request = self.requests[0]
        self.assertEqual(request.url.host, 'api.github.com')
        self.assertEqual(
            request.url.path, '/repos/octo-org/widget/contents/package.json'
        )
        self.assertEqual(request.url.params['ref'], 'main')
        self.assertEqual(
            request.headers['Accept'], 'application/vnd.github.raw+json'
        )
        self.assertEqual(request.headers['Authorization'], 'Bearer test-token')

    async def test_get_package_version_without_token(self) -> None:
        self.config = models.GitHubConfiguration()
        client = self._client(
            lambda request: httpx.Response(200, text='{"version": "0.1.0"}')
        )
        self.assertEqual(
            await client.get_package_version('octo-org', 'widget', 'main'),
            '0.1.0',
        )
        self.assertNotIn('Authorization', self.requests[0].headers)

    async def test_get_package_version_not_found(self) -> None:
        client = self._client(
            lambda request: httpx.Response(404, json={'message': 'Not Found'})
        )
        self.assertIsNone(
            await client.get_package_version('octo-org', 'widget', 'main')
        )

    async def test_get_package_version_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError('Connection refused', request=request)

        client = self._client(handler)
        self.assertIsNone(
            await client.get_package_version('octo-org', 'widget', 'main')
        )

    async def test_get_package_version_invalid_json(self) -> None:
        client = self._client(
            lambda request: httpx.Response(200, text='{"version": ')
        )
        self.assertIsNone(
            await client.get_package_version('octo-org', 'widget', 'main')
        )

    async def test_get_package_version_missing_field(self) -> None:
        for body in ['{"name": "widget"}', '["1.0.0"]', '{"version": 1}']:
            with self.subTest(body=body):
                client = self._client(
                    lambda request, body=body: httpx.Response(200, text=body)
                )
                self.assertIsNone(
                    await client.get_package_version(
                        'octo-org', 'widget', 'main'
                    )
                )

    async def test_get_tags_single_page(self) -> None:
        client = self._client(
            lambda request: httpx.Response(
                200, json=_tags('v1.0.0', 'latest')
            )
        )
        tags = await client.get_tags('octo-org', 'widget')
        self.assertEqual([tag.name for tag in tags], ['v1.0.0', 'latest'])
        self.assertEqual(tags[0].commit.sha, f'{0:040x}')
        self.assertEqual(len(self.requests), 1)
        self.assertEqual(self.requests[0].url.params['per_page'], '100')
        self.assertEqual(self.requests[0].url.params['page'], '1')

    async def test_get_tag_names_paginates(self) -> None:
        first_page = [f'1.0.{patch}' for patch in range(100)]

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params['page'] == '1':
                return httpx.Response(200, json=_tags(*first_page))
            return httpx.Response(200, json=_tags('2.0.0'))

        client = self._client(handler)
        names = await client.get_tag_names('octo-org', 'widget')
        self.assertEqual(names, [*first_page, '2.0.0'])
        self.assertEqual(
            [request.url.params['page'] for request in self.requests],
            ['1', '2'],
        )

    async def test_get_tag_names_empty(self) -> None:
        client = self._client(
            lambda request: httpx.Response(200, json=[])
        )
        self.assertEqual(await client.get_tag_names('octo-org', 'widget'), [])

    async def test_get_tags_repository_not_found(self) -> None:
        client = self._client(
            lambda request: httpx.Response(404, json={'message': 'Not Found'})
        )
        with self.assertRaises(errors.GitHubNotFoundError):
            await client.get_tags('octo-org', 'missing')

    async def test_get_tags_server_error(self) -> None:
        client = self._client(
            lambda request: httpx.Response(502, text='Bad Gateway')
        )
        with self.assertRaises(httpx.HTTPStatusError):
            await client.get_tag_names('octo-org', 'widget')

    async def test_get_tags_invalid_response(self) -> None:
        bodies = ['{"message": "unexpected"}', '[{"sha": "abc"}]', '<html>']
        for body in bodies:
            with self.subTest(body=body):
                client = self._client(
                    lambda request, body=body: httpx.Response(200, text=body)
                )
                with self.assertRaises(errors.GitHubResponseError):
                    await client.get_tags('octo-org', 'widget')

    async def test_enterprise_base_url(self) -> None:
        self.config = models.GitHubConfiguration(
            hostname='github.example.com'
        )
        client = self._client(
            lambda request: httpx.Response(200, json=[])
        )
        await client.get_tags('octo-org', 'widget')
        self.assertEqual(self.requests[0].url.host, 'github.example.com')
        self.assertEqual(
            self.requests[0].url.path, '/api/v3/repos/octo-org/widget/tags'
        )

    async def test_context_manager_closes_client(self) -> None:
        async with clients.GitHub(
            self.config,
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, json=[])
            ),
        ) as client:
            await client.get_tags('octo-org', 'widget')
        self.assertTrue(client.http_client.is_closed)
