import httpx


def _new_client() -> httpx.AsyncClient:
    return httpx.AsyncClient()


def bearer_headers(access_token: str, extra: dict[str, str] | None = None) -> dict[str, str]:
    headers = {"Authorization": f"Bearer {access_token}"}
    if extra:
        headers.update(extra)
    return headers


async def post_bytes(url: str, content: bytes, headers: dict[str, str]) -> httpx.Response:
    async with _new_client() as client:
        return await client.post(url, content=content, headers=headers)


async def post_json(url: str, payload: dict, headers: dict[str, str]) -> httpx.Response:
    async with _new_client() as client:
        return await client.post(url, json=payload, headers=headers)


async def get(url: str, headers: dict[str, str], params: dict | None = None) -> httpx.Response:
    async with _new_client() as client:
        return await client.get(url, params=params, headers=headers)
