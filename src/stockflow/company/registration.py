"""Company registration — command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from stockflow.company.company import Company
from stockflow.domain import stockflow


@stockflow.command(part_of="Company")
class RegisterCompany:
    name = String(required=True, max_length=255)


@stockflow.command_handler(part_of=Company)
class CompanyRegistrationHandler:
    @handle(RegisterCompany)
    def register_company(self, command):
        company = Company.register(name=command.name)
        current_domain.repository_for(Company).add(company)
        return str(company.id)
