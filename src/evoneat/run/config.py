import configparser
import os

from evoneat.genotype.node_gene import DEFAULT_ACTIVATION

class NeatSettings:

    def __init__(self, config_file: str | None = None):
        """
        Initialize NeatSettings by parsing an INI file, or with the default values.

        Every option is optional in the INI file; a missing option keeps its default.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, every option takes its default value.
        """

        # Defaults
        self.weight                 = 2.0
        self.weight_mutate          = 1.0
        self.weight_max             = 10.0
        self.weight_mutate_rate     = 0.8
        self.add_connection_rate    = 0.2
        self.add_node_rate          = 0.1
        self.activation             = DEFAULT_ACTIVATION
        self.activation_mutate      = 1.0
        self.activation_mutate_rate = 0.1
        self.connections_diff       = 1.0
        self.weight_diff            = 0.4
        self.species_threshold      = 1.0
        self.feedforward            = True
        self.reset_fitness          = False

        if config_file is None:
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Helper function to safely parse values
        def get_value(section, key, value_type, default):
            try:
                if value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
            except (configparser.NoSectionError, configparser.NoOptionError):
                return default

        # [CONNECTION]

        # New connections get a weight drawn uniformly from [-weight, weight].
        self.weight = get_value('CONNECTION', 'weight', float, self.weight)

        # Weight mutation adds a value drawn uniformly from [-weight_mutate, weight_mutate].
        self.weight_mutate = get_value('CONNECTION', 'weight_mutate', float, self.weight_mutate)

        # Mutated weights are clipped to [-weight_max, weight_max].
        self.weight_max = get_value('CONNECTION', 'weight_max', float, self.weight_max)

        # The probability that mutation will change the weight of an enabled connection.
        self.weight_mutate_rate = get_value('CONNECTION', 'weight_mutate_rate', float, self.weight_mutate_rate)

        # The probability that mutation will attempt to add a connection (or re-enable
        # a disabled one) between existing nodes.
        self.add_connection_rate = get_value('CONNECTION', 'add_connection_rate', float, self.add_connection_rate)

        # Whether to refuse connections that would create a cycle in the network.
        self.feedforward = get_value('CONNECTION', 'feedforward', bool, self.feedforward)

        # [NODE]

        # The probability that mutation will split a connection with a new node.
        self.add_node_rate = get_value('NODE', 'add_node_rate', float, self.add_node_rate)

        # The sigmoid steepness of newly created nodes.
        self.activation = get_value('NODE', 'activation', float, self.activation)

        # Steepness mutation adds a value drawn uniformly from [-activation_mutate, activation_mutate].
        self.activation_mutate = get_value('NODE', 'activation_mutate', float, self.activation_mutate)

        # The probability that mutation will change the steepness of a node.
        self.activation_mutate_rate = get_value('NODE', 'activation_mutate_rate', float, self.activation_mutate_rate)

        # [SPECIATION]

        # The coefficient of the (normalized) count of non-matching connections
        # in the genomic distance.
        self.connections_diff = get_value('SPECIATION', 'connections_diff', float, self.connections_diff)

        # The coefficient of the summed weight difference of matching connections
        # in the genomic distance.
        self.weight_diff = get_value('SPECIATION', 'weight_diff', float, self.weight_diff)

        # Genomes whose distance is less than this threshold belong to the same species.
        self.species_threshold = get_value('SPECIATION', 'species_threshold', float, self.species_threshold)

        # [EVALUATION]

        # Whether to re-evaluate every organism (and the best one so far) each
        # generation, for tasks whose score is stochastic.
        self.reset_fitness = get_value('EVALUATION', 'reset_fitness', bool, self.reset_fitness)

    def __repr__(self):
        options = ', '.join(f"{name}={value}" for name, value in vars(self).items())
        return f"NeatSettings({options})"
