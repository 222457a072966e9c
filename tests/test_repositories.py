"""
Tests for repositories - the SQL each query method hands to the session.
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects.postgresql import asyncpg

from jobly.core.exceptions import QueryBuildError
from jobly.repositories.company_repository import CompanyRepository
from jobly.repositories.job_repository import JobRepository
from jobly.repositories.user_repository import UserRepository


def _session_returning(row):
    """AsyncSession whose driver-level execute yields ``row``."""
    result = MagicMock()
    result.mappings.return_value.first.return_value = row

    conn = AsyncMock()
    conn.exec_driver_sql.return_value = result

    session = AsyncMock()
    session.connection.return_value = conn
    return session, conn


class TestPartialUpdate:
    def test_company_update_statement(self, company_data):
        session, conn = _session_returning(company_data)

        row = asyncio.run(CompanyRepository().partial_update(
            session, "c1", {"name": "New", "numEmployees": 10},
        ))

        statement, params = conn.exec_driver_sql.call_args.args
        assert statement.startswith(
            'UPDATE "companies" SET "name"=$1, "num_employees"=$2 WHERE "handle" = $3 RETURNING '
        )
        assert '"logo_url"' in statement
        assert params == ("New", 10, "c1")
        assert row == company_data

    def test_job_update_statement(self, job_data):
        session, conn = _session_returning(job_data)

        asyncio.run(JobRepository().partial_update(session, 1, {"salary": 500}))

        statement, params = conn.exec_driver_sql.call_args.args
        assert 'UPDATE "jobs" SET "salary"=$1 WHERE "id" = $2' in statement
        assert params == (500, 1)

    def test_user_update_statement(self, user_data):
        session, conn = _session_returning(user_data)

        asyncio.run(UserRepository().partial_update(
            session, "u1", {"firstName": "New", "lastName": "Name", "email": "n@n.com"},
        ))

        statement, params = conn.exec_driver_sql.call_args.args
        assert (
            'SET "first_name"=$1, "last_name"=$2, "email"=$3 WHERE "username" = $4'
            in statement
        )
        assert params == ("New", "Name", "n@n.com", "u1")

    def test_no_matching_row_returns_none(self):
        session, _ = _session_returning(None)

        row = asyncio.run(CompanyRepository().partial_update(session, "nope", {"name": "x"}))

        assert row is None

    def test_empty_update_never_reaches_database(self):
        session, conn = _session_returning(None)

        with pytest.raises(QueryBuildError):
            asyncio.run(CompanyRepository().partial_update(session, "c1", {}))

        session.connection.assert_not_called()
        conn.exec_driver_sql.assert_not_called()


class TestDelete:
    @pytest.mark.parametrize("rowcount,expected", [(1, True), (0, False)])
    def test_delete_reports_whether_row_existed(self, rowcount, expected):
        session = AsyncMock()
        session.execute.return_value = MagicMock(rowcount=rowcount)

        assert asyncio.run(JobRepository().delete(session, 1)) is expected


def _executed_sql(session) -> str:
    """The statement passed to ``session.execute``, rendered as asyncpg would see it."""
    stmt = session.execute.await_args.args[0]
    compiled = stmt.compile(dialect=asyncpg.dialect(), compile_kwargs={"literal_binds": True})
    return " ".join(str(compiled).split())


def _session_with_rows(rows=()):
    session = AsyncMock()
    session.execute.return_value = MagicMock()
    session.execute.return_value.scalars.return_value.all.return_value = list(rows)
    return session


class TestCompanyFindAll:
    def _sql(self, **filters) -> str:
        session = _session_with_rows()
        asyncio.run(CompanyRepository().find_all(session, **filters))
        return _executed_sql(session)

    def test_no_filters(self):
        sql = self._sql()

        assert "WHERE" not in sql
        assert sql.endswith("ORDER BY companies.name")

    def test_name_like(self):
        sql = self._sql(name_like="net")

        assert "WHERE companies.name ILIKE '%net%' ORDER BY companies.name" in sql

    def test_min_employees(self):
        assert "WHERE companies.num_employees >= 10 ORDER BY" in self._sql(min_employees=10)

    def test_max_employees(self):
        assert "WHERE companies.num_employees <= 500 ORDER BY" in self._sql(max_employees=500)

    def test_zero_bounds_still_filter(self):
        sql = self._sql(min_employees=0, max_employees=0)

        assert "companies.num_employees >= 0 AND companies.num_employees <= 0" in sql

    def test_all_filters_combined(self):
        sql = self._sql(name_like="c", min_employees=1, max_employees=3)

        assert (
            "WHERE companies.name ILIKE '%c%' "
            "AND companies.num_employees >= 1 "
            "AND companies.num_employees <= 3 "
            "ORDER BY companies.name"
        ) in sql

    def test_returns_rows(self):
        session = _session_with_rows(["c1", "c2"])

        assert asyncio.run(CompanyRepository().find_all(session)) == ["c1", "c2"]


class TestJobFindWithFilters:
    def _sql(self, **filters) -> str:
        session = _session_with_rows()
        asyncio.run(JobRepository().find_with_filters(session, **filters))
        return _executed_sql(session)

    def test_no_filters(self):
        sql = self._sql()

        assert "WHERE" not in sql
        assert sql.endswith("ORDER BY jobs.title, jobs.id")

    def test_title(self):
        assert "WHERE jobs.title ILIKE '%eng%' ORDER BY" in self._sql(title="eng")

    def test_min_salary(self):
        assert "WHERE jobs.salary >= 50000 ORDER BY" in self._sql(min_salary=50000)

    def test_has_equity(self):
        assert "WHERE jobs.equity > 0 ORDER BY" in self._sql(has_equity=True)

    @pytest.mark.parametrize("has_equity", [False, None])
    def test_has_equity_false_or_missing_does_not_filter(self, has_equity):
        assert "WHERE" not in self._sql(has_equity=has_equity)

    def test_all_filters_combined(self):
        sql = self._sql(title="eng", min_salary=100, has_equity=True)

        assert (
            "WHERE jobs.title ILIKE '%eng%' "
            "AND jobs.salary >= 100 "
            "AND jobs.equity > 0 "
            "ORDER BY jobs.title, jobs.id"
        ) in sql


class TestApplications:
    def test_add_application_ignores_repeats(self):
        session = AsyncMock()

        asyncio.run(UserRepository().add_application(session, "u1", 3))

        assert _executed_sql(session) == (
            "INSERT INTO applications (username, job_id) VALUES ('u1', 3) "
            "ON CONFLICT (username, job_id) DO NOTHING"
        )

    def test_application_ids_ordered(self):
        session = _session_with_rows([1, 3])

        ids = asyncio.run(UserRepository().get_application_ids(session, "u1"))

        assert ids == [1, 3]
        sql = _executed_sql(session)
        assert "WHERE applications.username = 'u1'" in sql
        assert sql.endswith("ORDER BY applications.job_id")
