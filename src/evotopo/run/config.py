import configparser
import os
from evotopo.activations import activations

class Config:

    @staticmethod
    def _parse_activation_options(raw_options):
        """
        Parse activation_options from string to list.

        Parameters:
            raw_options: Either "all", a comma-separated list, or already a list

        Returns:
            List of activation function names
        """
        # If already a list, return as-is
        if isinstance(raw_options, list):
            return raw_options

        if not isinstance(raw_options, str):
            raise ValueError(f"activation_options must be 'all' or a comma-separated list, got {raw_options!r}")

        if raw_options == 'all':
            return list(activations)

        # Parse comma-separated list
        parsed = [opt.strip() for opt in raw_options.split(',')]
        for opt in parsed:
            if opt not in activations:
                raise ValueError(f"Invalid activation function '{opt}' in activation_options")
        return parsed

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.input_count                = 2
            self.output_count               = 1
            self.activation_cycles          = 1
            self.weight_range               = 5.0
            self.initial_connection_density = 1.0
            self.activation_initial         = 'sigmoid'

            self.max_tries                  = 5
            self.min_links                  = 5
            self.add_link_probability       = 0.005
            self.add_neuron_probability     = 0.0005
            self.remove_link_probability    = 0.0005
            self.toggle_link_probability    = 0.0
            self.activation_probability     = 0.0
            self.weight_perturb_probability = 0.4
            self.weight_reset_probability   = 0.1
            self.weight_perturb_sigma       = 0.5
            self.weight_select_proportion   = 0.1

            self.activation_options = list(activations)

            self.validate()
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [POPULATION]

        # The number of input neurons, through which the network receives inputs.
        self.input_count = get_value('POPULATION', 'input_count', int)

        # The number of output neurons, to which the network delivers outputs.
        self.output_count = get_value('POPULATION', 'output_count', int)

        # How many times the network is activated per input.
        #   1  - strictly feed-forward topology, output neurons are never link sources
        #  >1  - recurrent links are allowed
        self.activation_cycles = get_value('POPULATION', 'activation_cycles', int, default=1)

        # Link weights are drawn from, and clamped to, [-weight_range, weight_range].
        self.weight_range = get_value('POPULATION', 'weight_range', float, default=5.0)

        # The fraction of all input/bias -> output links present in a newly created genome.
        self.initial_connection_density = get_value('POPULATION', 'initial_connection_density', float, default=1.0)

        # Activation function given to output neurons and to new hidden neurons.
        self.activation_initial = get_value('POPULATION', 'activation_initial', str, default='sigmoid')

        # [MUTATION]

        # How many times a structural mutation looks for an applicable spot before giving up.
        self.max_tries = get_value('MUTATION', 'max_tries', int, default=5)

        # A link is only removed from genomes having at least this many links.
        self.min_links = get_value('MUTATION', 'min_links', int, default=5)

        # Relative weights used to pick the mutation applied to a parent.
        # They do not need to sum up to 1, they are normalized.
        self.add_link_probability       = get_value('MUTATION', 'add_link_probability'      , float, default=0.005)
        self.add_neuron_probability     = get_value('MUTATION', 'add_neuron_probability'    , float, default=0.0005)
        self.remove_link_probability    = get_value('MUTATION', 'remove_link_probability'   , float, default=0.0005)
        self.toggle_link_probability    = get_value('MUTATION', 'toggle_link_probability'   , float, default=0.0)
        self.activation_probability     = get_value('MUTATION', 'activation_probability'    , float, default=0.0)
        self.weight_perturb_probability = get_value('MUTATION', 'weight_perturb_probability', float, default=0.4)
        self.weight_reset_probability   = get_value('MUTATION', 'weight_reset_probability'  , float, default=0.1)

        # The standard deviation of the zero-centered normal distribution
        # from which a weight perturbation is drawn.
        self.weight_perturb_sigma = get_value('MUTATION', 'weight_perturb_sigma', float, default=0.5)

        # The fraction of links a weight mutation touches.
        self.weight_select_proportion = get_value('MUTATION', 'weight_select_proportion', float, default=0.1)

        # Which activation functions an activation mutation can pick.
        # Options: "all" or a comma-separated list
        raw_options = get_value('MUTATION', 'activation_options', str, default='all')
        self.activation_options = self._parse_activation_options(raw_options)

        self.validate()

    def validate(self) -> None:
        """
        Check that the values are usable.

        Raises:
            ValueError: If some value is out of its allowed range
        """
        if self.input_count < 0 or self.output_count < 1:
            raise ValueError(f"bad neuron counts: {self.input_count} inputs, {self.output_count} outputs")
        if self.activation_cycles < 1:
            raise ValueError(f"activation_cycles must be at least 1, got {self.activation_cycles}")
        if self.weight_range <= 0:
            raise ValueError(f"weight_range must be positive, got {self.weight_range}")
        if not 0.0 <= self.initial_connection_density <= 1.0:
            raise ValueError(f"initial_connection_density must be in [0, 1], got {self.initial_connection_density}")
        if self.max_tries < 1:
            raise ValueError(f"max_tries must be at least 1, got {self.max_tries}")
        if self.activation_initial not in activations:
            raise ValueError(f"Invalid activation function '{self.activation_initial}' in activation_initial")

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse activation_options when set.
        This allows users to write config.activation_options = "all" and have it
        automatically converted to the list of activation names.
        """
        if name == 'activation_options':
            value = self._parse_activation_options(value)
        super().__setattr__(name, value)
