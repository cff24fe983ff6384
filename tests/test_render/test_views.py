"""Tests for the roster view builders (views.py) and page shell (page.py)."""

from roster.models.player import Player
from roster.render.page import build_page
from roster.render.target import Action
from roster.render.views import (
    NO_PLAYERS_MESSAGE,
    render_all_players,
    render_new_player_form,
    render_single_player,
)


class TestRenderAllPlayers:
    def test_empty_roster_renders_single_message(self, main_target):
        bindings = render_all_players([], main_target)

        assert main_target.html.count(NO_PLAYERS_MESSAGE) == 1
        assert 'player-card' not in main_target.html
        assert bindings == []

    def test_one_card_per_player(self, main_target, sample_players):
        render_all_players(sample_players, main_target)

        assert main_target.html.count('class="player-card"') == len(sample_players)
        for player in sample_players:
            assert f"<h2>{player.name}</h2>" in main_target.html
            assert f"<p>ID: {player.id}</p>" in main_target.html
            assert f'alt="{player.name}"' in main_target.html

    def test_remove_bindings_carry_exact_ids(self, main_target, sample_players):
        bindings = render_all_players(sample_players, main_target)

        remove_ids = [b.payload for b in bindings if b.action == Action.REMOVE]
        assert remove_ids == [p.id for p in sample_players]
        for b in bindings:
            assert f'data-action="{b.control_id}"' in main_target.html

    def test_details_bindings_carry_full_record(self, main_target, sample_players):
        bindings = render_all_players(sample_players, main_target)

        details = [b.payload for b in bindings if b.action == Action.DETAILS]
        assert details == sample_players

    def test_replaces_rather_than_appends(self, main_target, sample_players):
        render_all_players(sample_players, main_target)
        render_all_players(sample_players[:1], main_target)

        assert main_target.html.count('class="player-card"') == 1
        assert len(main_target.bindings) == 2

    def test_empty_after_full_clears_cards(self, main_target, sample_players):
        render_all_players(sample_players, main_target)
        render_all_players([], main_target)

        assert 'player-card' not in main_target.html
        assert main_target.bindings == []

    def test_html_is_escaped(self, main_target):
        render_all_players([Player(id=1, name='<b>Rex</b>', image_url='"x')], main_target)

        assert '<b>Rex</b>' not in main_target.html
        assert '&lt;b&gt;Rex&lt;/b&gt;' in main_target.html
        assert 'src="&quot;x"' in main_target.html


class TestRenderSinglePlayer:
    def test_detail_card_fields(self, main_target, sample_players):
        anise = sample_players[1]
        render_single_player(anise, main_target)

        html = main_target.html
        assert html.count('class="player-card"') == 1
        assert "<h2>Anise</h2>" in html
        assert "<p>ID: 5618</p>" in html
        assert "<p>Breed: Dachshund</p>" in html
        assert 'src="https://images.test/anise.jpg"' in html
        assert "<p>Team: Ruff</p>" in html

    def test_unassigned_when_no_team(self, main_target, sample_players):
        render_single_player(sample_players[0], main_target)

        assert "<p>Team: Unassigned</p>" in main_target.html

    def test_back_binding(self, main_target, sample_players):
        bindings = render_single_player(sample_players[0], main_target)

        assert [b.action for b in bindings] == [Action.BACK]
        assert "Back to all players" in main_target.html


class TestRenderNewPlayerForm:
    def test_three_required_inputs(self, form_target):
        render_new_player_form(form_target)

        html = form_target.html
        assert html.count('<input') == 3
        assert html.count('required') == 3
        for field_id in ('name', 'breed', 'imageBox'):
            assert f'id="{field_id}"' in html

    def test_submit_binding(self, form_target):
        bindings = render_new_player_form(form_target)

        assert [b.action for b in bindings] == [Action.SUBMIT]
        assert "Add New Player" in form_target.html

    def test_rerender_gives_fresh_form(self, form_target):
        render_new_player_form(form_target)
        first = form_target.html
        render_new_player_form(form_target)

        assert form_target.html == first
        assert form_target.render_count == 2


class TestBuildPage:
    def test_page_contains_both_containers(self, main_target, form_target, sample_players):
        render_all_players(sample_players, main_target)
        render_new_player_form(form_target)

        page = build_page(main_target, form_target)

        assert page.startswith("<!DOCTYPE html>")
        assert '<form id="new-player-form">' in page
        assert page.count('<main>') == 1
        assert page.count('class="player-card"') == 3
        assert page.index('<form id="new-player-form">') < page.index('<main>')
