"""Tests for frontend skeleton planning (clarion_scaffold.scaffolder.frontend_gen).

Covers:
- package.json / tsconfig.json documents
- Generated entry module, base query, API slice and view components
"""

from __future__ import annotations

import json

import pytest

from clarion_scaffold.config import GeneratorConfig
from clarion_scaffold.scaffolder.frontend_gen import (
    NPM_DEPENDENCIES,
    NPM_DEV_DEPENDENCIES,
    FrontendGenerator,
    frontend_dir,
    package_manifest,
    tsconfig,
)


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit

BASE = "billing-core/billing-core-frontend"


@pytest.fixture
def frontend_files(renderer, config, user_input, names) -> dict[str, str]:
    nodes = FrontendGenerator(renderer, config).nodes(user_input, names)
    return {n.path: n.content for n in nodes if not n.is_directory}


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class TestFrontendLayout:
    def test_frontend_dir(self, names):
        assert frontend_dir(names) == BASE

    def test_directories_then_files(self, renderer, config, user_input, names):
        nodes = FrontendGenerator(renderer, config).nodes(user_input, names)
        assert [n.path for n in nodes[:2]] == [BASE, f"{BASE}/src"]
        assert all(n.is_directory for n in nodes[:2])
        assert not any(n.is_directory for n in nodes[2:])

    def test_files(self, frontend_files):
        assert set(frontend_files) == {
            f"{BASE}/package.json",
            f"{BASE}/tsconfig.json",
            f"{BASE}/src/index.ts",
            f"{BASE}/src/baseQuery.ts",
            f"{BASE}/src/billingCoreApi.ts",
            f"{BASE}/src/Message.tsx",
            f"{BASE}/src/Messages.tsx",
        }


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------


class TestPackageManifest:
    def test_scoped_name(self, user_input, names):
        assert package_manifest(user_input, names)["name"] == "@acme/billing-core-frontend"

    def test_author(self, user_input, names):
        assert package_manifest(user_input, names)["author"] == "Ada <ada@example.com>"

    def test_dependencies(self, user_input, names):
        data = package_manifest(user_input, names)
        assert data["dependencies"] == NPM_DEPENDENCIES
        assert data["devDependencies"] == NPM_DEV_DEPENDENCIES
        assert data["scripts"] == {"build": "rm -rf dist && tsc"}

    def test_api_list(self, user_input, names):
        clarion = package_manifest(user_input, names)["customFields"]["clarion"]
        assert clarion["api"] == ["billingCoreApi"]

    def test_routes(self, user_input, names):
        clarion = package_manifest(user_input, names)["customFields"]["clarion"]
        assert clarion["routes"] == [
            {"path": "/acme/billing-core/messages", "element": "<Messages />"},
            {"path": "/acme/billing-core/messages/:id", "element": "<Message />"},
        ]

    def test_menu(self, user_input, names):
        menu = package_manifest(user_input, names)["customFields"]["clarion"]["menu"]
        assert menu["name"] == "BillingCore Application"
        assert menu["entries"] == [{"name": "Messages", "path": "/acme/billing-core/messages"}]

    def test_rendered_file_round_trips(self, frontend_files, user_input, names):
        parsed = json.loads(frontend_files[f"{BASE}/package.json"])
        assert parsed == package_manifest(user_input, names)


# ---------------------------------------------------------------------------
# tsconfig.json
# ---------------------------------------------------------------------------


class TestTsconfig:
    def test_static_options(self):
        options = tsconfig()["compilerOptions"]
        assert options["module"] == "esnext"
        assert options["jsx"] == "react-jsx"
        assert options["target"] == "es6"
        assert options["outDir"] == "dist"
        assert options["strict"] is True
        assert options["lib"] == ["es2017", "dom"]

    def test_include(self):
        assert tsconfig()["include"] == ["./src/**/*"]

    def test_independent_of_input(self, frontend_files):
        assert json.loads(frontend_files[f"{BASE}/tsconfig.json"]) == tsconfig()


# ---------------------------------------------------------------------------
# Generated runtime modules
# ---------------------------------------------------------------------------


class TestIndexModule:
    def test_reexports(self, frontend_files):
        content = frontend_files[f"{BASE}/src/index.ts"]
        assert 'import { billingCoreApi } from "./billingCoreApi";' in content
        assert "export {\n    billingCoreApi,\n    Message,\n    Messages,\n};" in content

    def test_shared_backend_config(self, frontend_files):
        content = frontend_files[f"{BASE}/src/index.ts"]
        assert 'export const backend: BackendType = { url: "http://localhost:8000"' in content
        assert "export const updateFrontend = (config: BackendType) => {" in content
        for field in ("url", "token", "user"):
            assert f"backend.{field} = config.{field};" in content

    def test_backend_url_from_config(self, renderer, tmp_path, user_input, names):
        config = GeneratorConfig(output_dir=tmp_path, backend_url="https://clarion.test")
        nodes = FrontendGenerator(renderer, config).nodes(user_input, names)
        index = next(n for n in nodes if n.path.endswith("/src/index.ts"))
        assert 'url: "https://clarion.test"' in index.content


class TestBaseQuery:
    def test_route_prefix(self, frontend_files):
        content = frontend_files[f"{BASE}/src/baseQuery.ts"]
        assert "const routePrefix = '/api/acme/billing-core';" in content
        assert "rawBaseQuery(backend.url + routePrefix)" in content

    def test_bearer_token(self, frontend_files):
        content = frontend_files[f"{BASE}/src/baseQuery.ts"]
        assert "headers.set('Authorization', 'Bearer ' + backend.token);" in content
        assert "fetchBaseQuery" in content


class TestApiModule:
    def test_slice(self, frontend_files):
        content = frontend_files[f"{BASE}/src/billingCoreApi.ts"]
        assert "export const billingCoreApi = createApi({" in content
        assert "reducerPath: 'acme-billing-core-api'," in content
        assert "} = billingCoreApi;" in content

    def test_crud_endpoints(self, frontend_files):
        content = frontend_files[f"{BASE}/src/billingCoreApi.ts"]
        for endpoint in ("getMessages", "getMessage", "createMessage", "updateMessage", "deleteMessage"):
            assert f"    {endpoint}: builder." in content
        for method in ("POST", "PUT", "DELETE"):
            assert f"method: '{method}'" in content

    def test_cache_tags(self, frontend_files):
        content = frontend_files[f"{BASE}/src/billingCoreApi.ts"]
        assert content.count("providesTags: ['Message']") == 2
        assert content.count("invalidatesTags: ['Message']") == 3

    def test_hooks_export(self, frontend_files):
        content = frontend_files[f"{BASE}/src/billingCoreApi.ts"]
        assert "\n\n// Extract hooks\nexport const {\n  useGetMessagesQuery," in content

    def test_template_literals_untouched(self, frontend_files):
        content = frontend_files[f"{BASE}/src/billingCoreApi.ts"]
        assert "query: (id) => `/messages/${id}`," in content


class TestViewComponents:
    def test_message_detail(self, frontend_files):
        content = frontend_files[f"{BASE}/src/Message.tsx"]
        assert "import { MessageType } from './billingCoreApi';" in content
        assert "<h2>Message from: {message.from}</h2>" in content

    def test_messages_states(self, frontend_files):
        content = frontend_files[f"{BASE}/src/Messages.tsx"]
        assert "import { useGetMessagesQuery, MessageType } from './billingCoreApi';" in content
        assert "if (isLoading) {\n    return <div>Loading messages...</div>;" in content
        assert "if (error) {\n    return <div>Error fetching messages.</div>;" in content
        assert "{messages?.map((msg: MessageType) => (" in content
