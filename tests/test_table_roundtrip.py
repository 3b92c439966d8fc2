"""End-to-end: the table client driving the real listing endpoint over HTTP."""

import asyncio

import httpx

from main import app
from table_client.data_table import Column, DataTable, Filter
from table_client.navigator import HttpNavigator


async def _login(http: httpx.AsyncClient) -> str:
    creds = {"name": "Tabel", "email": "tabel@example.com", "password": "geheim-wachtwoord"}
    r = await http.post("/register", json=creds)
    assert r.status_code == 201, r.text
    r = await http.post("/login/access-token", data={"username": creds["email"], "password": creds["password"]})
    return r.json()["access_token"]


async def _scenario():
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
            token = await _login(http)
            headers = {"Authorization": f"Bearer {token}"}
            for i in range(23):
                status = "actief" if i % 2 else "concept"
                r = await http.post(
                    "/projects",
                    json={"name": f"Project {i:02d}", "status": status, "priority": "normaal"},
                    headers=headers,
                )
                assert r.status_code == 201

            navigator = HttpNavigator(http, token=token)
            first = await navigator.get("/projects", {})
            table = DataTable(
                navigator,
                "/projects",
                [Column("name", "Naam", sortable=True), Column("status", "Status")],
                filters=[Filter.from_options("status", "Statussen", first["statuses"])],
                debounce_delay=0.01,
            )
            table.apply(first)
            seen = {"initial": table.summary()}

            await table.handle_sort("name")
            seen["sorted"] = [row.cells[0] for row in table.rows()][:2]

            await table.handle_page_change(3)
            seen["page3"] = (table.summary(), table.controls()["next"]["disabled"])

            await table.handle_filter_change("status", "actief")
            seen["filtered"] = (table.pagination["total"], table.current_filters["page"])

            table.handle_search("project 1")
            await asyncio.sleep(0.05)
            await table.wait_settled()
            seen["searched"] = sorted(row.cells[0] for row in table.rows())

            await table.handle_filter_change("status", "onbekend")
            seen["invalid"] = (table.current_filters["status"], table.pagination["total"])

            await table.clear_filters()
            seen["cleared"] = (table.pagination["total"], table.current_filters["sort_by"])
            return seen


def test_table_client_against_listing_endpoint():
    app.state.chat_backend = None
    seen = asyncio.run(_scenario())

    assert seen["initial"] == "1 tot 10 van 23 resultaten"
    assert seen["sorted"] == ["Project 00", "Project 01"]
    assert seen["page3"] == ("21 tot 23 van 23 resultaten", True)
    assert seen["filtered"] == (11, 1)
    assert seen["searched"] == [
        "Project 11", "Project 13", "Project 15", "Project 17", "Project 19",
    ]
    assert seen["invalid"] == ("", 10)
    assert seen["cleared"] == (23, "")
