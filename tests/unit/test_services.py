"""Unit tests for the team, crew, division and stats services."""

from unittest.mock import AsyncMock, patch

import pytest

from pulsefinder import PulseFinder
from pulsefinder.exceptions import (
    MalformedPayloadError,
    NotFoundError,
    TransportError,
)
from pulsefinder.services.stats import DEFAULT_LEADERBOARD_COUNT, DEFAULT_START_RANK


def _ok(data) -> dict:
    return {"success": True, "data": data}


class TestTeamService:
    """Tests for TeamService."""

    @pytest.mark.asyncio
    async def test_get_team(self, sdk: PulseFinder, make_response) -> None:
        """Test a team payload is validated into a Team."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200,
                _ok(
                    {
                        "teamId": "t1",
                        "playerIds": ["p1", "p2"],
                        "teamName": "Foxes",
                        "currentTeamRank": 33,
                    }
                ),
            )

            team = await sdk.team.get_team("t1")

            assert team.team_name == "Foxes"
            assert team.player_ids == ["p1", "p2"]
            assert mock_request.call_args.args == ("GET", "/v1/teams/t1")

    @pytest.mark.asyncio
    async def test_get_team_from_list(self, sdk: PulseFinder, make_response) -> None:
        """Test a {teams: [...]} payload yields the first team."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, _ok({"teams": [{"teamId": "t1"}, {"teamId": "t2"}]})
            )

            assert (await sdk.team.get_team("t1")).team_id == "t1"

    @pytest.mark.asyncio
    async def test_get_team_empty_list_raises(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test an empty team list raises NotFoundError."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, _ok({"teams": []}))

            with pytest.raises(NotFoundError, match="t9"):
                await sdk.team.get_team("t9")

    @pytest.mark.asyncio
    async def test_get_team_members(self, sdk: PulseFinder, make_response) -> None:
        """Test the member list is parsed."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, _ok({"members": [{"playerId": "p1", "playerName": "Zed"}]})
            )

            members = await sdk.team.get_team_members("t1")

            assert members[0].player_name == "Zed"
            assert mock_request.call_args.args == ("GET", "/v1/teams/t1/members")

    @pytest.mark.asyncio
    async def test_get_teams_for_players(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test teams for several players come back in one call."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200,
                {
                    "sequenceNumber": 1,
                    "response": {"payload": {"teams": [{"teamId": "t1"}]}},
                },
            )

            teams = await sdk.team.get_teams_for_players(["p1", "p2"])

            assert [t.team_id for t in teams] == ["t1"]
            assert mock_request.call_args.args == ("POST", "/v1/teams/by-players")
            assert mock_request.call_args.kwargs["json"] == {"playerIds": ["p1", "p2"]}

    @pytest.mark.asyncio
    async def test_get_teams_for_players_empty(self, sdk: PulseFinder) -> None:
        """Test no players means no request and no teams."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            assert await sdk.team.get_teams_for_players([]) == []
            mock_request.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_teams_for_players_failure(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test a failure envelope yields an empty list."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, {"success": False})

            assert await sdk.team.get_teams_for_players(["p1"]) == []


class TestCrewService:
    """Tests for CrewService."""

    @pytest.mark.asyncio
    async def test_get_crew(self, sdk: PulseFinder, make_response) -> None:
        """Test a wrapped crewData object is unwrapped."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, _ok({"crewData": {"crewId": "c1", "crewName": "Night Owls"}})
            )

            crew = await sdk.crew.get_crew("c1")

            assert crew.crew_name == "Night Owls"
            assert mock_request.call_args.args == ("GET", "/v1/crews/c1")

    @pytest.mark.asyncio
    async def test_get_crew_quotes_id_in_path(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test reserved characters in an id stay inside one path segment."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, _ok({"crewId": "a/b?c"}))

            await sdk.crew.get_crew("a/b?c")

            assert mock_request.call_args.args == ("GET", "/v1/crews/a%2Fb%3Fc")

    @pytest.mark.asyncio
    async def test_get_crew_structured_error_raises_not_found(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test an error object in a failed envelope becomes NotFoundError."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, {"success": False, "error": {"code": "NOT_FOUND"}}
            )

            with pytest.raises(NotFoundError, match="NOT_FOUND"):
                await sdk.crew.get_crew("c1")

    @pytest.mark.asyncio
    async def test_get_crew_null_success_raises_malformed(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test success=null surfaces as MalformedPayloadError."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, {"success": None, "data": {"crewId": "c1"}}
            )

            with pytest.raises(MalformedPayloadError):
                await sdk.crew.get_crew("c1")

    @pytest.mark.asyncio
    async def test_get_crew_with_string_request_id(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test an RPC envelope with a string requestId is unwrapped."""
        rpc = {
            "sequenceNumber": 1,
            "response": {"requestId": "req-abc", "payload": {"crewId": "c1"}},
        }
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, _ok(rpc))

            crew = await sdk.crew.get_crew("c1")

            assert crew.crew_id == "c1"

    @pytest.mark.asyncio
    async def test_get_crew_members_from_list(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test a bare player list becomes a roster."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, _ok([{"playerId": "p1"}, {"playerId": "p2"}])
            )

            roster = await sdk.crew.get_crew_members("c1")

            assert [p.player_id for p in roster.players] == ["p1", "p2"]
            assert roster.division is None

    @pytest.mark.asyncio
    async def test_get_player_crew(self, sdk: PulseFinder, make_response) -> None:
        """Test the crew entry of a player is returned."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, _ok({"crewEntry": {"crewId": "c1"}})
            )

            crew = await sdk.crew.get_player_crew("p1")

            assert crew.crew_id == "c1"
            assert mock_request.call_args.args == ("GET", "/v1/players/p1/crew")

    @pytest.mark.asyncio
    async def test_get_player_crew_no_crew(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test a crewless player raises NotFoundError."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, _ok({"noCrew": True}))

            with pytest.raises(NotFoundError, match="not in a crew"):
                await sdk.crew.get_player_crew("p1")

    @pytest.mark.asyncio
    async def test_get_crew_stats_raw(self, sdk: PulseFinder, make_response) -> None:
        """Test crew stats are returned as decoded JSON."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, _ok({"wins": 12}))

            assert await sdk.crew.get_crew_stats("c1") == {"wins": 12}


class TestDivisionService:
    """Tests for DivisionService."""

    @pytest.mark.asyncio
    async def test_get_division(self, sdk: PulseFinder, make_response) -> None:
        """Test a division payload is parsed."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, _ok({"divisionId": "d1", "divisionName": "Gold League"})
            )

            division = await sdk.division.get_division("d1")

            assert division.division_name == "Gold League"
            assert mock_request.call_args.args == ("GET", "/v1/divisions/d1")

    @pytest.mark.asyncio
    async def test_get_player_and_crew_division(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test the player and crew routes are used."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, _ok({"divisionData": {"divisionId": "d2"}})
            )

            assert (await sdk.division.get_player_division("p1")).division_id == "d2"
            assert mock_request.call_args.args == (
                "GET",
                "/v1/divisions/player/p1",
            )

            assert (await sdk.division.get_crew_division("c1")).division_id == "d2"
            assert mock_request.call_args.args == ("GET", "/v1/divisions/crew/c1")

    @pytest.mark.asyncio
    async def test_get_division_teams(self, sdk: PulseFinder, make_response) -> None:
        """Test division crews are parsed."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(
                200, _ok({"crews": [{"crewId": "c1"}, {"crewId": "c2"}]})
            )

            crews = await sdk.division.get_division_teams("d1")

            assert [c.crew_id for c in crews] == ["c1", "c2"]

    @pytest.mark.asyncio
    async def test_missing_division_raises(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test success=false raises NotFoundError."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, {"success": False})

            with pytest.raises(NotFoundError):
                await sdk.division.get_division_standings("d404")


class TestStatsService:
    """Tests for StatsService."""

    @pytest.mark.asyncio
    async def test_get_player_stats(self, sdk: PulseFinder, make_response) -> None:
        """Test player stats are returned as decoded JSON."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, _ok({"kills": 100}))

            assert await sdk.stats.get_player_stats("p1") == {"kills": 100}
            assert mock_request.call_args.args == ("GET", "/v1/players/p1/stats")

    @pytest.mark.asyncio
    async def test_leaderboard_defaults(self, sdk: PulseFinder, make_response) -> None:
        """Test the default page is the first hundred ranks."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, _ok({"entries": []}))

            await sdk.stats.get_leaderboard("season-1")

            assert mock_request.call_args.args == ("GET", "/v1/leaderboards/season-1")
            assert mock_request.call_args.kwargs["params"] == {
                "startRank": DEFAULT_START_RANK,
                "count": DEFAULT_LEADERBOARD_COUNT,
            }

    @pytest.mark.asyncio
    async def test_leaderboard_rejects_bad_paging(self, sdk: PulseFinder) -> None:
        """Test ranks and counts below 1 are rejected."""
        with pytest.raises(ValueError, match="start_rank"):
            await sdk.stats.get_leaderboard("season-1", start_rank=0)
        with pytest.raises(ValueError, match="count"):
            await sdk.stats.get_leaderboard("season-1", count=0)

    @pytest.mark.asyncio
    async def test_player_leaderboard_rank(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test the player rank route is used."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(200, _ok({"rank": 17}))

            assert await sdk.stats.get_player_leaderboard_rank("lb", "p1") == {
                "rank": 17
            }
            assert mock_request.call_args.args == (
                "GET",
                "/v1/leaderboards/lb/player/p1",
            )

    @pytest.mark.asyncio
    async def test_server_error_propagates(
        self, sdk: PulseFinder, make_response
    ) -> None:
        """Test transport errors are not swallowed by services."""
        with patch.object(
            sdk.auth._client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = make_response(500, text="boom")

            with pytest.raises(TransportError):
                await sdk.stats.get_team_stats("t1")
