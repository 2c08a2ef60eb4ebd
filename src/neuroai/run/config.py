import configparser
import os
from neuroai.activations import ActivationFunction

class Config:

    @staticmethod
    def _parse_names(raw_names):
        """
        Parse a comma-separated list of input or output names.

        Parameters:
            raw_names: Either a comma-separated string or already a list

        Returns:
            List of names (empty entries dropped)
        """
        if raw_names is None:
            return []
        if isinstance(raw_names, list):
            return raw_names
        return [name.strip() for name in raw_names.split(',') if name.strip()]

    @staticmethod
    def _parse_activation(raw_activation):
        """
        Parse an activation function name.

        Parameters:
            raw_activation: An activation name (e.g. "relu") or already an ActivationFunction

        Returns:
            The matching ActivationFunction
        """
        if isinstance(raw_activation, ActivationFunction):
            return raw_activation
        try:
            return ActivationFunction(raw_activation.strip().lower())
        except ValueError:
            valid = ', '.join(a.value for a in ActivationFunction)
            raise ValueError(f"Invalid activation function '{raw_activation}' (allowed: {valid})") from None

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding default values.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.population_size   = 20
            self.input_names       = ['input_0', 'input_1']
            self.output_names      = ['output_0']
            self.num_hidden_layers = 1
            self.hidden_layer_size = 4
            self.input_activation  = ActivationFunction.LINEAR
            self.hidden_activation = ActivationFunction.RECTIFIED_LINEAR
            self.output_activation = ActivationFunction.SIGMOID

            # Set defaults for breeding
            self.num_breeding       = 5
            self.offspring_per_pair = 2
            self.num_survivors      = 2

            # Set defaults for mutation
            self.num_weight_mutations  = 3
            self.num_bias_mutations    = 1
            self.max_weight_delta      = 0.5
            self.max_bias_delta        = 0.5
            self.layer_add_probability = 0.0

            # Set defaults for termination
            self.fitness_termination_check = False
            self.fitness_criterion         = 'max'
            self.fitness_threshold         = None
            self.max_number_generations    = 100

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

        # [POPULATION_INIT]

        # The number of networks in the initial generation.
        self.population_size = get_value('POPULATION_INIT', 'population_size', int)

        # Comma-separated names of the network inputs and outputs.
        # Their number sets the size of the input and output layers.
        self.input_names  = self._parse_names(get_value('POPULATION_INIT', 'input_names' , str))
        self.output_names = self._parse_names(get_value('POPULATION_INIT', 'output_names', str))

        # The number and size of the hidden layers of newly-created networks.
        self.num_hidden_layers = get_value('POPULATION_INIT', 'num_hidden_layers', int, default=0)
        self.hidden_layer_size = get_value('POPULATION_INIT', 'hidden_layer_size', int, default=0)

        # Activation function of the input, hidden and output layers.
        # Options: linear, relu, leaky_relu, binary_step, sigmoid, tanh, swish, argmax, softmax
        self.input_activation  = get_value('POPULATION_INIT', 'input_activation' , str, default='linear')
        self.hidden_activation = get_value('POPULATION_INIT', 'hidden_activation', str, default='relu')
        self.output_activation = get_value('POPULATION_INIT', 'output_activation', str, default='sigmoid')

        # [BREEDING]

        # The number of highest scoring networks forming the breeding pool.
        # Every pair in the pool produces offspring.
        self.num_breeding = get_value('BREEDING', 'num_breeding', int)

        # The number of children produced by each pair of the breeding pool.
        self.offspring_per_pair = get_value('BREEDING', 'offspring_per_pair', int)

        # The number of highest scoring networks carried over
        # unchanged into the next generation (elitism).
        self.num_survivors = get_value('BREEDING', 'num_survivors', int, default=0)

        # [MUTATION]

        # The number of weights and biases perturbed in each child.
        self.num_weight_mutations = get_value('MUTATION', 'num_weight_mutations', int)
        self.num_bias_mutations   = get_value('MUTATION', 'num_bias_mutations'  , int)

        # The largest absolute change applied by a single weight or bias perturbation.
        self.max_weight_delta = get_value('MUTATION', 'max_weight_delta', float)
        self.max_bias_delta   = get_value('MUTATION', 'max_bias_delta'  , float)

        # The probability, each generation, that all networks grow an identity
        # hidden layer. Applied to the whole population so that it stays homologous.
        self.layer_add_probability = get_value('MUTATION', 'layer_add_probability', float, default=0.0)

        # [TERMINATION]

        # Whether to use the fitness of the most recent
        # generation as a criterion for stopping the run.
        self.fitness_termination_check = get_value('TERMINATION', 'fitness_termination_check', bool, default=False)

        # The function used to compute the termination criterion.
        # Only applicable if 'fitness_termination_check' is 'True'.
        # Allowed values:
        #   "mean" calculate the mean fitness across the entire population
        #   "max"  get the fitness of the fittest network in the population
        self.fitness_criterion = get_value('TERMINATION', 'fitness_criterion', str, default='max')

        # The fitness value which when met or exceeded causes the run to end.
        # Only applicable if 'fitness_termination_check' is 'True'.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=None)

        # The number of generations after which to stop the run.
        # If 'fitness_termination_check' is 'True', the run may stop sooner.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        if self.fitness_criterion not in ('max', 'mean'):
            raise ValueError(f"Invalid fitness_criterion '{self.fitness_criterion}' (allowed: max, mean)")
        if not 0.0 <= self.layer_add_probability <= 1.0:
            raise ValueError("layer_add_probability must be in [0, 1]")
        if self.fitness_termination_check and self.fitness_threshold is None:
            raise ValueError("fitness_threshold is required when fitness_termination_check is True")

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse names and activations when set.
        This allows users to write config.hidden_activation = "tanh" or
        config.input_names = "x, y" and have them converted.
        """
        if name in ('input_activation', 'hidden_activation', 'output_activation'):
            value = self._parse_activation(value)
        elif name in ('input_names', 'output_names'):
            value = self._parse_names(value)
        super().__setattr__(name, value)
