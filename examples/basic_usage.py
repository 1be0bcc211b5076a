# python
import logging
from dataclasses import dataclass, field, fields

from validator_options import CascadeMode, GlobalConfiguration, get_global_configuration


@dataclass
class Customer:
    surname: str = field(default="", metadata={"display_name": "Last name"})


class CityOfAddress:
    def property_chain(self):
        return ("Address", "City")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    config = get_global_configuration()
    config.update(cascade_mode=CascadeMode.STOP, property_chain_separator="/")

    config.error_code_resolver = lambda validator: f"VAL_{type(validator).__name__}"

    surname = fields(Customer)[0]
    print("Property:", config.property_name_resolver(Customer, surname, None))
    print("Chain:", config.property_name_resolver(Customer, surname, CityOfAddress()))
    print("Display:", config.display_name_resolver(Customer, surname, None))

    with config.temp_update(disable_accessor_cache=True):
        print("Accessor cache disabled:", config.disable_accessor_cache)

    config.error_code_resolver = None
    print("Error code:", config.error_code_resolver(config.language_manager))
    print(GlobalConfiguration is config)
