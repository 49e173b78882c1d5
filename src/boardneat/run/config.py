import configparser
import os
from boardneat.activations import activations

class Config:

    @staticmethod
    def _parse_activation(raw_value):
        """
        Validate the name of the activation function used by non-input neurons.

        Parameters:
            raw_value: name of an activation function (see 'basic_activations.py')

        Returns:
            the validated name
        """
        name = raw_value.strip()
        if name not in activations:
            raise ValueError(f"Invalid activation function '{name}'")
        return name

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding defaults.

        Every key is optional in the INI file: keys that are absent keep
        the default value listed below.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding only the defaults.
        """

        # [GENOME]

        # The number of input nodes, through which the network receives the
        # encoded game state, and the number of output nodes, through which
        # it delivers its decisions.
        self.num_inputs  = 126
        self.num_outputs = 9

        # [NODE]

        # Activation function applied by hidden and output neurons.
        self.activation = "sigmoid"

        # [MUTATION]

        # Per-call rates of the structural mutations. Each rate drives a loop
        # that rolls while the remaining budget is positive, so a rate above
        # 1.0 means several attempts per call.
        self.link_add_rate = 0.2
        self.node_add_rate = 0.1
        self.enable_rate   = 0.6
        self.disable_rate  = 0.2

        # Rate of weight mutation attempts per call (same decrementing loop).
        self.weight_mutation_rate = 2.0

        # Probability that a weight mutation shifts the weight rather than replacing it.
        self.perturb_chance = 0.9

        # Width of the uniform interval [-step/2, +step/2] used when shifting a weight.
        self.shift_step = 0.1

        # New and replaced weights are drawn uniformly from [-weight_range, +weight_range].
        self.weight_range = 2.0

        # [SPECIATION]

        # Coefficients of the excess, disjoint and mean weight difference
        # terms of the speciation distance.
        self.distance_excess_coeff   = 1.0
        self.distance_disjoint_coeff = 1.0
        self.distance_weight_coeff   = 0.4

        if config_file is None:
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Helper function to safely parse values
        def get_value(section, key, value_type, default):
            try:
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == str:
                    return parser.get(section, key)
            except (configparser.NoSectionError, configparser.NoOptionError):
                return default

        self.num_inputs  = get_value('GENOME', 'num_inputs' , int, self.num_inputs)
        self.num_outputs = get_value('GENOME', 'num_outputs', int, self.num_outputs)

        self.activation = get_value('NODE', 'activation', str, self.activation)

        self.link_add_rate        = get_value('MUTATION', 'link_add_rate'       , float, self.link_add_rate)
        self.node_add_rate        = get_value('MUTATION', 'node_add_rate'       , float, self.node_add_rate)
        self.enable_rate          = get_value('MUTATION', 'enable_rate'         , float, self.enable_rate)
        self.disable_rate         = get_value('MUTATION', 'disable_rate'        , float, self.disable_rate)
        self.weight_mutation_rate = get_value('MUTATION', 'weight_mutation_rate', float, self.weight_mutation_rate)
        self.perturb_chance       = get_value('MUTATION', 'perturb_chance'      , float, self.perturb_chance)
        self.shift_step           = get_value('MUTATION', 'shift_step'          , float, self.shift_step)
        self.weight_range         = get_value('MUTATION', 'weight_range'        , float, self.weight_range)

        self.distance_excess_coeff   = get_value('SPECIATION', 'distance_excess_coeff'  , float, self.distance_excess_coeff)
        self.distance_disjoint_coeff = get_value('SPECIATION', 'distance_disjoint_coeff', float, self.distance_disjoint_coeff)
        self.distance_weight_coeff   = get_value('SPECIATION', 'distance_weight_coeff'  , float, self.distance_weight_coeff)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate the activation function name whenever it is set,
        whether it comes from the configuration file or is assigned directly.
        """
        if name == 'activation':
            value = self._parse_activation(value)
        super().__setattr__(name, value)
